import logging
import re
from urllib.parse import urlsplit

from flask import Flask, render_template, request, redirect, url_for, abort
from flask_migrate import Migrate

from config import get_config
from models import db
from services import SettingsManager, apply_filters, get_registered_setting, update_option

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
)

db.init_app(app)
migrate = Migrate(app, db)

# Plugin settings page, options record and settings link
settings_manager = SettingsManager.from_config(app.config)
settings_manager.register(app)

# Control characters and backslashes never appear in a same-site path
UNSAFE_REDIRECT_CHARS = re.compile(r'[\x00-\x1f\x7f\\]')


def collect_option_fields(form, option_name):
    """
    Gather submitted fields named option_name[key] into a dict keyed by key.

    Fields belonging to other options are ignored.
    """
    prefix = option_name + '['
    values = {}
    for name in form:
        if name.startswith(prefix) and name.endswith(']'):
            values[name[len(prefix):-1]] = form.get(name)
    return values


def is_local_path(target):
    """
    Only same-site absolute paths are accepted as redirect targets.

    Control characters are dropped by Werkzeug when it builds the
    Location header, so a path containing any is refused.
    """
    if not target or UNSAFE_REDIRECT_CHARS.search(target):
        return False

    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return False
    return parts.path.startswith('/') and not parts.path.startswith('//')


def with_settings_updated(target):
    separator = '&' if '?' in target else '?'
    return f'{target}{separator}settings-updated=true'


# ============================================
# ROUTES - ADMIN
# ============================================

@app.route('/')
def index():
    return redirect(url_for('plugins'))


@app.route('/admin/plugins')
def plugins():
    plugin_file = settings_manager.plugin_file
    plugin = {
        'name': app.config['PLUGIN_NAME'],
        'version': app.config['PLUGIN_VERSION'],
        'file': plugin_file,
        'links': apply_filters('plugin_action_links', [], plugin_file),
    }
    return render_template('plugins.html', plugins=[plugin])


@app.route('/admin/options', methods=['POST'])
def options():
    group = request.form.get('option_page', '')
    setting = get_registered_setting(group)
    if setting is None:
        app.logger.warning("Rejected options submission for unknown settings group %r", group)
        abort(400)

    submitted = collect_option_fields(request.form, setting.option_name)
    update_option(setting.option_name, setting.sanitize_callback(submitted))
    app.logger.info("Saved options for settings group %s", group)

    target = request.form.get('redirect_to', '')
    if not is_local_path(target):
        target = url_for('plugins')
    return redirect(with_settings_updated(target))


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db():
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    init_db()
    app.run(debug=app.config.get('DEBUG', False), host='127.0.0.1', port=5000, use_reloader=False)
