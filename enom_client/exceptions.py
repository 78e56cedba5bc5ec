"""
Custom exceptions for eNom API operations
"""

from typing import Any, Dict, List, Optional


class EnomError(Exception):
    """Base exception for all eNom client errors"""

    def __init__(self, message: str, response_data: Optional[Dict[str, Any]] = None):
        self.message = message
        self.response_data = response_data or {}
        super().__init__(self.message)

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class DomainError(EnomError):
    """Raised when a domain or TLD is not on the list of recognized TLDs"""
    pass


class CommandError(EnomError):
    """Raised when the eNom response reports one or more errors"""

    def __init__(self, message: str, errors: Optional[List[str]] = None, response=None):
        self.errors = list(errors or [])
        self.response = response
        super().__init__(message, response_data=dict(response) if response is not None else None)


class ConfigurationError(EnomError):
    """Raised when an operation conflicts with the current configuration"""
    pass


class TransportError(EnomError):
    """Raised when the HTTP request fails or returns a non-success status"""

    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        super().__init__(message, response_data=response_data)

    def __str__(self):
        if self.status_code:
            return f"TransportError (HTTP {self.status_code}): {self.message}"
        return f"TransportError: {self.message}"


class ParseError(EnomError):
    """Raised when a response body is not a well-formed eNom XML document"""
    pass
