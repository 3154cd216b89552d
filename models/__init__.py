"""
Models Package

Exports the database models and the db instance for use throughout the plugin.
"""

from .base import db

from .settings import Settings

__all__ = [
    'db',
    'Settings',
]
