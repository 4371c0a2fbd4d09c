# apps/core/exceptions.py
"""
Custom exceptions for outbound integrations
"""


class ExternalServiceError(Exception):
    """Base exception for failed calls to external services"""

    pass


class PurgomalumError(ExternalServiceError):
    """Exception raised when the profanity check cannot be completed"""

    pass


class KitchenridersError(ExternalServiceError):
    """Exception raised when a delivery request is rejected or fails"""

    pass
