# apps/infrastructure/config.py

"""
Configuration Management

Environment-specific adapter configurations for different deployment contexts.
"""

import os
from typing import Any, Dict


def get_environment() -> str:
    """
    Get current environment from environment variable

    Returns:
        Environment name: 'test', 'development', 'staging', or 'production'
    """
    return os.getenv("ENVIRONMENT", "development")


def get_config() -> Dict[str, Any]:
    """
    Get configuration for current environment

    Returns:
        Configuration dictionary for active environment
    """
    env = get_environment()

    configs = {
        "test": TEST_CONFIG,
        "development": DEVELOPMENT_CONFIG,
        "staging": STAGING_CONFIG,
        "production": PRODUCTION_CONFIG,
    }

    config = dict(configs.get(env, DEVELOPMENT_CONFIG))
    config["environment"] = env  # Add environment name to config

    return config


# ============================================================
# TEST CONFIGURATION
# ============================================================

TEST_CONFIG = {
    "repositories": {"type": "django"},
    "profanity": {"type": "fake", "words": ["비속어", "욕설"]},
    "delivery": {"type": "fake"},
}

# ============================================================
# DEVELOPMENT CONFIGURATION
# ============================================================

DEVELOPMENT_CONFIG = {
    "repositories": {"type": "django"},
    "profanity": {
        "type": "purgomalum",
        "base_url": os.getenv("PURGOMALUM_BASE_URL", "https://www.purgomalum.com"),
        "timeout": 5.0,
    },
    "delivery": {
        "type": "kitchenriders",
        "base_url": os.getenv("KITCHENRIDERS_BASE_URL"),  # unset: log only
        "api_key": os.getenv("KITCHENRIDERS_API_KEY"),
        "timeout": 10.0,
    },
}

# ============================================================
# STAGING CONFIGURATION
# ============================================================

STAGING_CONFIG = {
    "repositories": {"type": "django"},
    "profanity": {
        "type": "purgomalum",
        "base_url": os.getenv("PURGOMALUM_BASE_URL", "https://www.purgomalum.com"),
        "timeout": 5.0,
    },
    "delivery": {
        "type": "kitchenriders",
        "base_url": os.getenv("KITCHENRIDERS_BASE_URL"),
        "api_key": os.getenv("KITCHENRIDERS_API_KEY"),
        "timeout": 10.0,
    },
}

# ============================================================
# PRODUCTION CONFIGURATION
# ============================================================

PRODUCTION_CONFIG = {
    "repositories": {"type": "django"},
    "profanity": {
        "type": "purgomalum",
        "base_url": os.getenv("PURGOMALUM_BASE_URL", "https://www.purgomalum.com"),
        "timeout": 3.0,
    },
    "delivery": {
        "type": "kitchenriders",
        "base_url": os.getenv("KITCHENRIDERS_BASE_URL"),
        "api_key": os.getenv("KITCHENRIDERS_API_KEY"),
        "timeout": 5.0,
    },
}


# ============================================================
# CONFIGURATION HELPERS
# ============================================================


def get_profanity_config() -> Dict[str, Any]:
    """Get profanity checker configuration for current environment"""
    return get_config()["profanity"]


def get_delivery_config() -> Dict[str, Any]:
    """Get delivery agency configuration for current environment"""
    return get_config()["delivery"]


def is_production() -> bool:
    """Check if running in production environment"""
    return get_environment() == "production"


def is_test() -> bool:
    """Check if running in test environment"""
    return get_environment() == "test"
