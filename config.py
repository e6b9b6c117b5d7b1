"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB max request body

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Serving range offered to the shopper
    MIN_SERVINGS = 1
    MAX_SERVINGS = 12

    # Upper bound on recipes in one grocery list request
    MAX_RECIPES_PER_REQUEST = 100


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    LOG_LEVEL = 'WARNING'
    MAX_RECIPES_PER_REQUEST = 5


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
