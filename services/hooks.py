"""
Hooks Service

Named filters that let other code adjust values the plugin produces,
and the registry of settings groups the options endpoint accepts.
"""

from collections import OrderedDict, namedtuple

# tag -> list of callbacks, in the order they were added
_filters = {}

# settings group -> RegisteredSetting
_registered_settings = OrderedDict()

RegisteredSetting = namedtuple('RegisteredSetting', ['group', 'option_name', 'sanitize_callback'])


def add_filter(tag, callback):
    """Register a callback that receives and returns the value filtered under tag."""
    _filters.setdefault(tag, []).append(callback)


def remove_filter(tag, callback):
    """
    Unregister a callback from a filter.

    Returns:
        True if the callback was registered, False otherwise
    """
    callbacks = _filters.get(tag, [])
    if callback not in callbacks:
        return False
    callbacks.remove(callback)
    return True


def has_filter(tag, callback=None):
    """Whether tag has any callbacks, or has callback when one is given."""
    callbacks = _filters.get(tag, [])
    if callback is None:
        return bool(callbacks)
    return callback in callbacks


def apply_filters(tag, value, *args):
    """
    Pass a value through every callback registered under tag.

    Each callback gets the value returned by the previous one, followed
    by any extra arguments.

    Args:
        tag: The filter name
        value: The value to filter
        *args: Extra context passed to each callback

    Returns:
        The filtered value
    """
    for callback in list(_filters.get(tag, [])):
        value = callback(value, *args)
    return value


def register_setting(group, option_name, sanitize_callback):
    """
    Accept form submissions for an option under a settings group.

    Args:
        group: The settings group named by the form's option_page field
        option_name: The option the submitted values are stored under
        sanitize_callback: Called with the submitted values, returns what gets stored
    """
    _registered_settings[group] = RegisteredSetting(group, option_name, sanitize_callback)


def get_registered_setting(group):
    """Return the RegisteredSetting for a group, or None."""
    return _registered_settings.get(group)
