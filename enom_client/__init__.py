"""
eNom reseller API client
"""

from enom_client.api import (
    COMMAND_DEFAULT_OPTIONS,
    CheckResponse,
    Connection,
    Response,
    register_command,
    register_response_class,
)
from enom_client.exceptions import (
    CommandError,
    ConfigurationError,
    DomainError,
    EnomError,
    ParseError,
    TransportError,
)
from enom_client.utils.config import (
    get_allow_any_tld,
    get_default_logger,
    set_allow_any_tld,
    set_default_logger,
)
from enom_client.utils.validators import ALLOWED_TLDS, get_sld_and_tld

__version__ = "0.1.0"

__all__ = [
    "Connection",
    "Response",
    "CheckResponse",
    "COMMAND_DEFAULT_OPTIONS",
    "register_command",
    "register_response_class",
    "EnomError",
    "DomainError",
    "CommandError",
    "ConfigurationError",
    "TransportError",
    "ParseError",
    "get_allow_any_tld",
    "set_allow_any_tld",
    "get_default_logger",
    "set_default_logger",
    "ALLOWED_TLDS",
    "get_sld_and_tld",
]
