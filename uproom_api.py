from uproom import create_app, db
from uproom.models import Company

app = create_app()


@app.shell_context_processor
def make_shell_context():
    return {
        "db": db,
        "Company": Company,
        "subdomains": app.extensions['subdomain_service'],
    }


if __name__ == '__main__':
    app.run(debug=not app.config['DOMAIN_CONFIG'].production)
