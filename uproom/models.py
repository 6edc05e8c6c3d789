from uproom import db
import datetime


class Company(db.Model):
    """Tenant record. Only the subdomain lookup matters to this service;
    companies are created by the signup flow that owns this table."""
    __tablename__ = 'companies'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    subdomain = db.Column(db.String(30), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.datetime.utcnow)

    def __str__(self):
        return f"{self.name} ({self.subdomain})"
