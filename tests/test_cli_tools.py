def test_check_subdomain_available(runner):
    result = runner.invoke(args=['check-subdomain', 'globex'])
    assert result.exit_code == 0
    assert 'globex: Subdomain is available' in result.output


def test_check_subdomain_taken_exits_nonzero(runner, acme):
    result = runner.invoke(args=['check-subdomain', 'acme'])
    assert result.exit_code == 1
    assert 'acme: Subdomain is already taken' in result.output


def test_check_subdomain_reserved(runner):
    result = runner.invoke(args=['check-subdomain', 'www'])
    assert result.exit_code == 1
    assert 'reserved' in result.output


def test_suggest_subdomain_free(runner):
    result = runner.invoke(args=['suggest-subdomain', 'Globex Corporation'])
    assert result.exit_code == 0
    assert 'Candidate: globex-corporation' in result.output
    assert 'Status: Subdomain is available' in result.output
    assert 'Alternatives' not in result.output


def test_suggest_subdomain_lists_alternatives(runner, acme):
    result = runner.invoke(args=['suggest-subdomain', 'Acme', '--count', '2'])
    assert result.exit_code == 0
    assert 'Candidate: acme' in result.output
    assert '  acme-1' in result.output
    assert '  acme-2' in result.output
    assert 'acme-3' not in result.output


def test_suggest_subdomain_without_alternatives(runner):
    result = runner.invoke(args=['suggest-subdomain', '!!', '--count', '3'])
    assert result.exit_code == 0
    assert 'Candidate: (empty)' in result.output
    assert 'No free alternatives found' in result.output
