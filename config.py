"""
Application Configuration

Centralizes all Flask and plugin configuration settings.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///transifex_stats.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Plugin identity
    PLUGIN_NAME = 'Transifex Stats'
    PLUGIN_VERSION = '0.1'
    PAGE_SLUG = 'transifex-stats'

    # Options record and the settings group its form posts under
    OPTIONS_NAME = 'cpti_options'
    SETTINGS_GROUP = 'cpti-settings-group'

    # Transifex API used for the credential check
    TRANSIFEX_API_URL = os.environ.get('TRANSIFEX_API_URL', 'https://www.transifex.com/api/2/projects/')
    TRANSIFEX_TIMEOUT = float(os.environ.get('TRANSIFEX_TIMEOUT', '10'))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    TRANSIFEX_API_URL = 'https://transifex.test/api/2/projects/'
    TRANSIFEX_TIMEOUT = 1.0


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
