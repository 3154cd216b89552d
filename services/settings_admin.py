"""
Settings Admin Service

The plugin's settings page: default values, sanitizing submitted values,
the one-off credential check after a save, and rendering of the form and
its notices.
"""

import enum
import logging
from dataclasses import dataclass

from flask import g, render_template, request, url_for
from markupsafe import Markup

from constants import FIELD_TABLE, InputKind, SanitizerKind
from utils.sanitizer import sanitize_text_field, sanitize_password, sanitize_checkbox
from .hooks import add_filter, has_filter, apply_filters, register_setting
from .options import get_option, update_option
from .transifex_api import TransifexAPI, DEFAULT_API_URL

logger = logging.getLogger(__name__)

DEFAULTS_FILTER = 'cpti-defaults'
ACTION_LINKS_FILTER = 'plugin_action_links'

CREDENTIALS_INCORRECT = 'Your transifex credentials are incorrect.'


class NoticeSeverity(enum.Enum):
    ERROR = 'error'
    WARNING = 'warning'
    SUCCESS = 'success'
    INFO = 'info'


@dataclass(frozen=True)
class Notice:
    """A message shown above the settings form for the current request only."""
    message: str
    severity: NoticeSeverity = NoticeSeverity.ERROR


# ============================================
# SANITIZERS
# ============================================

def _clean_text(raw_input, key):
    return sanitize_text_field(raw_input.get(key))


def _clean_password(raw_input, key):
    return sanitize_password(raw_input.get(key))


SANITIZERS = {
    SanitizerKind.TEXT: _clean_text,
    SanitizerKind.PASSWORD: _clean_password,
    SanitizerKind.BOOLEAN: sanitize_checkbox,
}


# ============================================
# INPUT DRIVERS
# ============================================

def input_text(option_name, key, value, css_class):
    """HTML text input."""
    return Markup("<input type='text' class='{}' id='{}' name='{}[{}]' value='{}'>").format(
        css_class, key, option_name, key, value)


def input_password(option_name, key, value, css_class):
    """HTML password input."""
    return Markup("<input type='password' class='{}' id='{}' name='{}[{}]' value='{}'>").format(
        css_class, key, option_name, key, value)


def input_checkbox(option_name, key, value, css_class):
    """HTML checkbox, checked when the stored value is truthy."""
    checked = Markup(' checked') if value else ''
    return Markup("<input type='checkbox' class='{}' id='{}' name='{}[{}]' value='true'{}>").format(
        css_class, key, option_name, key, checked)


INPUT_DRIVERS = {
    InputKind.TEXT: input_text,
    InputKind.PASSWORD: input_password,
    InputKind.CHECKBOX: input_checkbox,
}


class SettingsManager:
    """
    Settings page of the Transifex Stats plugin.

    The host calls register() to expose the page, accept form
    submissions for the options record and add the plugin's settings link.

    Args:
        options_name: Name of the stored options record
        settings_group: Settings group the form posts under
        page_slug: URL slug of the settings page
        plugin_name: Title shown on the page
        api_url: Transifex endpoint used for the credential check
        api_timeout: Timeout in seconds for the credential check
        api_class: Client class, called as api_class(username, password, api_url=, timeout=)
    """

    def __init__(self, options_name='cpti_options', settings_group='cpti-settings-group',
                 page_slug='transifex-stats', plugin_name='Transifex Stats',
                 api_url=DEFAULT_API_URL, api_timeout=10, api_class=TransifexAPI):
        self.options_name = options_name
        self.settings_group = settings_group
        self.page_slug = page_slug
        self.plugin_name = plugin_name
        self.api_url = api_url
        self.api_timeout = api_timeout
        self.api_class = api_class

    @classmethod
    def from_config(cls, config, **kwargs):
        """Build a manager from a Flask config mapping."""
        return cls(
            options_name=config['OPTIONS_NAME'],
            settings_group=config['SETTINGS_GROUP'],
            page_slug=config['PAGE_SLUG'],
            plugin_name=config['PLUGIN_NAME'],
            api_url=config['TRANSIFEX_API_URL'],
            api_timeout=config['TRANSIFEX_TIMEOUT'],
            **kwargs
        )

    # ============================================
    # HOST REGISTRATION
    # ============================================

    @property
    def plugin_file(self):
        return f'{self.page_slug}/{self.page_slug}.php'

    def register(self, app):
        """Expose the settings page on app and hook the plugin into the host."""
        app.add_url_rule(
            f'/admin/options-general/{self.page_slug}',
            endpoint='plugin_settings_page',
            view_func=self.plugin_settings_page,
        )
        register_setting(self.settings_group, self.options_name, self.sanitize_options)
        if not has_filter(ACTION_LINKS_FILTER, self.add_settings_link):
            add_filter(ACTION_LINKS_FILTER, self.add_settings_link)

    def add_settings_link(self, links, plugin_file):
        """Prepend a link to the settings page to this plugin's action links."""
        if plugin_file != self.plugin_file:
            return links

        link = Markup('<a href="{}">{}</a>').format(url_for('plugin_settings_page'), 'Settings')
        return [link] + list(links)

    def plugin_settings_page(self):
        """View for the settings page."""
        self.verify_credentials(request.args.get('settings-updated'))
        return self.render_settings_page()

    # ============================================
    # DEFAULTS
    # ============================================

    def get_default_values(self):
        """Default value of every field, after the cpti-defaults filter."""
        defaults = {field.key: field.default for field in FIELD_TABLE}
        return apply_filters(DEFAULTS_FILTER, defaults)

    def enforce_defaults(self, settings):
        """
        Fill in any field missing from a settings record.

        The completed record is stored only when something was added, so a
        record that is already complete causes no write.

        Args:
            settings: Stored settings dict, or None if nothing is stored

        Returns:
            The completed settings dict
        """
        settings = dict(settings) if isinstance(settings, dict) else {}

        changed = False
        for key, value in self.get_default_values().items():
            if key not in settings:
                settings[key] = value
                changed = True

        if changed:
            update_option(self.options_name, settings)
            logger.info("Stored default values for %s", self.options_name)

        return settings

    def load_options(self):
        """Stored settings record, completed with defaults."""
        options = get_option(self.options_name)
        if options is not None and not isinstance(options, dict):
            logger.warning("Stored option %s is not a mapping, resetting to defaults", self.options_name)
            options = None
        return self.enforce_defaults(options)

    # ============================================
    # SANITIZE
    # ============================================

    def sanitize_options(self, raw_input):
        """
        Clean submitted form values into a settings record.

        The result holds exactly the fields of the field table; anything
        else that was submitted is dropped.

        Args:
            raw_input: Mapping of field key to submitted value. Unchecked
                checkboxes are absent.

        Returns:
            New settings dict
        """
        if raw_input is None:
            raw_input = {}

        new_options = {}
        for field in FIELD_TABLE:
            new_options[field.key] = SANITIZERS[field.sanitizer](raw_input, field.key)
        return new_options

    # ============================================
    # CREDENTIALS & NOTICES
    # ============================================

    @property
    def notices(self):
        """Notices queued during the current request."""
        return g.setdefault('cpti_notices', [])

    def add_notice(self, message, severity=NoticeSeverity.ERROR):
        self.notices.append(Notice(message, severity))

    def verify_credentials(self, settings_updated):
        """
        Check the stored credentials right after the settings were saved.

        Does nothing unless an options record exists and settings_updated
        is 'true'. Queues one error notice when the check fails.
        """
        options = get_option(self.options_name)
        if options is None or settings_updated != 'true':
            return

        if not isinstance(options, dict):
            options = {}

        api = self.api_class(
            options.get('username', ''),
            options.get('password', ''),
            api_url=self.api_url,
            timeout=self.api_timeout,
        )
        if not api.verify_credentials():
            self.add_notice(CREDENTIALS_INCORRECT, NoticeSeverity.ERROR)

    def render_notices(self):
        """Markup for the queued notices, in the order they were added."""
        return Markup('').join(
            Markup('<div class="{}"><p>{}</p></div>').format(notice.severity.value, notice.message)
            for notice in self.notices
        )

    # ============================================
    # RENDER
    # ============================================

    def field_rows(self, options):
        """One row per field in table order, with its rendered input."""
        rows = []
        for field in FIELD_TABLE:
            driver = INPUT_DRIVERS[field.input_kind]
            value = options.get(field.key)
            if value is None:
                value = ''
            rows.append({
                'key': field.key,
                'label': field.label,
                'input': driver(self.options_name, field.key, value, field.css_class),
            })
        return rows

    def render_settings_page(self):
        """Render the settings form with the stored values."""
        options = self.load_options()
        return render_template(
            'settings.html',
            plugin_name=self.plugin_name,
            page_slug=self.page_slug,
            settings_group=self.settings_group,
            notices=self.render_notices(),
            rows=self.field_rows(options),
        )
