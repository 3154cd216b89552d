"""
Settings Model

Contains the Settings model for plugin option storage.
"""

from .base import db


class Settings(db.Model):
    """Key-value storage for plugin options. Values are JSON documents."""
    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(64), unique=True, nullable=False)
    value = db.Column(db.Text)
