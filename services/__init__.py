"""
Services Package

Business logic for the Transifex Stats plugin settings.
"""

from .hooks import (
    add_filter,
    remove_filter,
    has_filter,
    apply_filters,
    register_setting,
    get_registered_setting,
)

from .options import (
    get_option,
    update_option,
)

from .transifex_api import TransifexAPI

from .settings_admin import (
    Notice,
    NoticeSeverity,
    SettingsManager,
)

__all__ = [
    # Hooks
    'add_filter',
    'remove_filter',
    'has_filter',
    'apply_filters',
    'register_setting',
    'get_registered_setting',
    # Options
    'get_option',
    'update_option',
    # Transifex
    'TransifexAPI',
    # Settings page
    'Notice',
    'NoticeSeverity',
    'SettingsManager',
]
