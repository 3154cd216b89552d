"""
Option Storage Service

Reads and writes named option records. Each option is one JSON document
stored in a row of the settings table.
"""

import json
import logging

from models import db, Settings

logger = logging.getLogger(__name__)


def get_option(name, default=None):
    """
    Load a stored option.

    Args:
        name: The option name
        default: Returned when the option is absent or unreadable

    Returns:
        The decoded option value, or default
    """
    row = Settings.query.filter_by(key=name).first()
    if row is None or row.value is None:
        return default

    try:
        return json.loads(row.value)
    except ValueError:
        logger.warning("Stored option %s is not valid JSON, ignoring it", name)
        return default


def update_option(name, value):
    """Store an option, creating or replacing it."""
    row = Settings.query.filter_by(key=name).first()
    if row is None:
        row = Settings(key=name)
        db.session.add(row)
    row.value = json.dumps(value)
    db.session.commit()
