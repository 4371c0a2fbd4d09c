# config/settings/databases.py
"""
Database Configuration Module

Provides environment-specific database configurations for Django.
This module can be imported and tested independently of Django.

Supported environments:
- test: SQLite in a temporary file, or PostgreSQL when DB_ENGINE=postgresql
- development: Local PostgreSQL, or SQLite when DB_ENGINE=sqlite
- staging: Managed PostgreSQL for pre-production testing
- production: Managed PostgreSQL with certificate verification

Usage:
    from config.settings.databases import get_database_config

    db_config = get_database_config('development')
    DATABASES = {'default': db_config}
"""

import os
from pathlib import Path

# Base directory (project root)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# ============================================================================
# COMMON DATABASE SETTINGS
# ============================================================================

POSTGRES_DB_SETTINGS = {
    'ENGINE': 'django.db.backends.postgresql',
    'CONN_MAX_AGE': 60,
    'ATOMIC_REQUESTS': True,  # Wrap each request in a transaction
    'OPTIONS': {
        'connect_timeout': 10,
        'application_name': 'kitchenpos',  # Appears in pg_stat_activity
    },
}

SQLITE_DB_SETTINGS = {
    'ENGINE': 'django.db.backends.sqlite3',
    'ATOMIC_REQUESTS': True,
}


# ============================================================================
# ENVIRONMENT-SPECIFIC CONFIGURATIONS
# ============================================================================

def get_database_config(environment: str) -> dict:
    """
    Get database configuration for specified environment.

    Args:
        environment: One of 'test', 'development', 'staging', 'production'

    Returns:
        Dictionary with Django database configuration

    Raises:
        ValueError: If environment is not recognized

    Examples:
        >>> config = get_database_config('test')
        >>> config['ENGINE']
        'django.db.backends.sqlite3'
    """
    config_functions = {
        'test': _get_test_config,
        'development': _get_development_config,
        'staging': _get_staging_config,
        'production': _get_production_config,
    }

    if environment not in config_functions:
        valid_envs = ', '.join(config_functions.keys())
        raise ValueError(
            f"Invalid environment '{environment}'. "
            f"Must be one of: {valid_envs}"
        )

    return config_functions[environment]()


def _engine() -> str:
    return os.getenv('DB_ENGINE', '').lower()


def _get_test_config() -> dict:
    """
    Test environment configuration.

    SQLite unless DB_ENGINE=postgresql, in which case the ephemeral
    PostgreSQL container on port 5433 is used.
    """
    if _engine() != 'postgresql':
        return {
            **SQLITE_DB_SETTINGS,
            'NAME': str(BASE_DIR / 'test_kitchenpos.sqlite3'),
        }

    return {
        **POSTGRES_DB_SETTINGS,
        'NAME': os.getenv('DB_NAME', 'test_kitchenpos'),
        'USER': os.getenv('DB_USER', 'postgres'),
        'PASSWORD': os.getenv('DB_PASSWORD', 'postgres'),
        'HOST': os.getenv('DB_HOST', 'localhost'),
        'PORT': os.getenv('DB_PORT', '5433'),
        'TEST': {
            'NAME': 'test_kitchenpos',
        },
    }


def _get_development_config() -> dict:
    """
    Development environment configuration.

    Local PostgreSQL on port 5432, or a SQLite file next to manage.py
    when DB_ENGINE=sqlite.
    """
    if _engine() == 'sqlite':
        return {
            **SQLITE_DB_SETTINGS,
            'NAME': str(BASE_DIR / 'db.sqlite3'),
        }

    return {
        **POSTGRES_DB_SETTINGS,
        'NAME': os.getenv('DB_NAME', 'kitchenpos_dev'),
        'USER': os.getenv('DB_USER', 'kitchenpos'),
        'PASSWORD': os.getenv('DB_PASSWORD', 'dev_password_123'),
        'HOST': os.getenv('DB_HOST', 'localhost'),
        'PORT': os.getenv('DB_PORT', '5432'),
        'OPTIONS': {
            **POSTGRES_DB_SETTINGS['OPTIONS'],
            'sslmode': 'disable',
        },
    }


def _require_env(environment: str) -> None:
    required_vars = ['DB_NAME', 'DB_USER', 'DB_PASSWORD', 'DB_HOST']
    missing_vars = [var for var in required_vars if not os.getenv(var)]

    if missing_vars:
        raise ValueError(
            f"Missing required environment variables for {environment}: "
            f"{', '.join(missing_vars)}"
        )


def _get_staging_config() -> dict:
    """
    Staging environment configuration.

    SSL required. Credentials come from environment variables.
    """
    _require_env('staging')

    return {
        **POSTGRES_DB_SETTINGS,
        'NAME': os.getenv('DB_NAME'),
        'USER': os.getenv('DB_USER'),
        'PASSWORD': os.getenv('DB_PASSWORD'),
        'HOST': os.getenv('DB_HOST'),
        'PORT': os.getenv('DB_PORT', '5432'),
        'CONN_MAX_AGE': 300,
        'OPTIONS': {
            **POSTGRES_DB_SETTINGS['OPTIONS'],
            'sslmode': 'require',
        },
    }


def _get_production_config() -> dict:
    """
    Production environment configuration.

    SSL with full certificate verification and the longest connection reuse.
    """
    _require_env('production')

    return {
        **POSTGRES_DB_SETTINGS,
        'NAME': os.getenv('DB_NAME'),
        'USER': os.getenv('DB_USER'),
        'PASSWORD': os.getenv('DB_PASSWORD'),
        'HOST': os.getenv('DB_HOST'),
        'PORT': os.getenv('DB_PORT', '5432'),
        'CONN_MAX_AGE': 600,
        'OPTIONS': {
            **POSTGRES_DB_SETTINGS['OPTIONS'],
            'sslmode': 'verify-full',
            'sslrootcert': str(BASE_DIR / 'certs' / 'db-ca-bundle.pem'),
        },
    }


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_all_environments() -> list:
    """Get list of supported environment names."""
    return ['test', 'development', 'staging', 'production']


def validate_environment(environment: str) -> bool:
    """Check if environment name is valid."""
    return environment in get_all_environments()
