"""
Service-layer exceptions for consistent error handling across the groupware host.

"Not applicable" answers from activity extensions are plain ``None`` values
and never exceptions; these classes cover configuration and availability
problems only.
"""


class ServiceError(Exception):
    """Base exception for all service-related errors."""
    pass


class ServiceNotConfigured(ServiceError):
    """
    Raised when a service is enabled but its configuration is incomplete or broken.
    
    Example:
        If ACTIVITY_EXTENSIONS names a class that cannot be imported.
    """
    pass


class ServiceDisabled(ServiceError):
    """
    Raised when attempting to use a service that is explicitly disabled.
    
    Example:
        If the activity stream is switched off with ACTIVITY_ENABLED = False.
    """
    pass
