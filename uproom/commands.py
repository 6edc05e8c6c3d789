"""Operator commands: ``flask check-subdomain`` and ``flask suggest-subdomain``."""

import click

from uproom import get_subdomain_service


def register_commands(app):

    @app.cli.command('check-subdomain')
    @click.argument('name')
    def check_subdomain(name):
        """Validate NAME as-is against the naming rules and the database."""
        result = get_subdomain_service().validate_subdomain(name)
        click.echo(f"{name}: {result.message}")
        if not result.is_usable:
            raise click.exceptions.Exit(1)

    @app.cli.command('suggest-subdomain')
    @click.argument('name')
    @click.option('--count', default=None, type=click.IntRange(min=0),
                  help='How many numbered alternatives to try.')
    def suggest_subdomain(name, count):
        """Derive a subdomain from a company NAME and list free alternatives."""
        if count is None:
            count = app.config['SUBDOMAIN_ALTERNATIVES_COUNT']
        suggestion = get_subdomain_service().suggest(name, count)
        click.echo(f"Candidate: {suggestion.subdomain or '(empty)'}")
        click.echo(f"Status: {suggestion.validation.message}")
        if suggestion.validation.is_usable:
            return
        if suggestion.alternatives:
            click.echo("Alternatives:")
            for alternative in suggestion.alternatives:
                click.echo(f"  {alternative}")
        else:
            click.echo("No free alternatives found")
