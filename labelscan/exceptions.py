"""
labelscan Exceptions.

Address extraction itself never raises: a label without a postcode falls
back to the verbatim OCR text. These exceptions cover the surrounding
layers (configuration and map-link building).

Exception Hierarchy:
    LabelscanError (base)
    ├── ConfigurationError
    └── NavigationError
        ├── EmptyAddressError
        └── UnknownServiceError
"""

from typing import Optional

__all__ = [
    "LabelscanError",
    "ConfigurationError",
    "NavigationError",
    "EmptyAddressError",
    "UnknownServiceError",
]


class LabelscanError(Exception):
    """Base exception for all labelscan errors."""
    pass


class ConfigurationError(LabelscanError):
    """Invalid extraction threshold or environment override."""
    def __init__(self, message: str, setting: Optional[str] = None):
        self.setting = setting
        super().__init__(message)


class NavigationError(LabelscanError):
    """Error while building a map-service link."""
    pass


class EmptyAddressError(NavigationError):
    """No address to navigate to."""
    pass


class UnknownServiceError(NavigationError):
    """Map service is not supported."""
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Unknown map service: {service!r}")
