"""
Database Base Module

Creates the SQLAlchemy instance shared by the option storage model.
Kept in its own module so services can import it without importing app.py.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app in app.py
db = SQLAlchemy()
