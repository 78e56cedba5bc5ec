"""
API Layer - eNom command interface
"""

# Connection
from enom_client.api.connection import Connection

# Commands
from enom_client.api.commands import COMMAND_DEFAULT_OPTIONS, register_command

# Responses
from enom_client.api.responses import (
    CheckResponse,
    Response,
    register_response_class,
    response_class_for
)

__all__ = [
    # Connection
    "Connection",

    # Commands
    "COMMAND_DEFAULT_OPTIONS",
    "register_command",

    # Responses
    "Response",
    "CheckResponse",
    "register_response_class",
    "response_class_for",
]
