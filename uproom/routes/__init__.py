from uproom.routes.subdomains import bp as subdomains_bp
from uproom.routes.health import bp as health_bp


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(subdomains_bp)
    app.register_blueprint(health_bp)
