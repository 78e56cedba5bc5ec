"""
eNom command table
Each command maps to the default options sent with it
"""

from typing import Dict, Optional, Type

from enom_client.api.responses import RESPONSE_CLASSES, Response


COMMAND_DEFAULT_OPTIONS: Dict[str, Dict[str, str]] = {
    "check": {},
    "purchase": {},
}

# Set from the connection's credentials, never by callers
RESERVED_OPTIONS = ("uid", "pw", "responsetype", "command")


def register_command(
    name: str,
    defaults: Optional[Dict[str, str]] = None,
    response_class: Optional[Type[Response]] = None
) -> None:
    """
    Add a command to the table so Connection.execute accepts it.

    Args:
        name: eNom command name (e.g., 'getdomaininfo')
        defaults: Options always sent with the command
        response_class: Optional Response subclass for its results
    """
    reserved = [key for key in (defaults or {}) if key in RESERVED_OPTIONS]
    if reserved:
        raise ValueError(f"Command defaults cannot set reserved options: {', '.join(reserved)}")

    COMMAND_DEFAULT_OPTIONS[name] = dict(defaults or {})
    if response_class is not None:
        RESPONSE_CLASSES[name] = response_class


def default_options(name: str) -> Dict[str, str]:
    """Default options for a known command"""
    if name not in COMMAND_DEFAULT_OPTIONS:
        raise ValueError(
            f"Unknown eNom command: {name}. "
            f"Valid options are: {', '.join(COMMAND_DEFAULT_OPTIONS)}"
        )
    return dict(COMMAND_DEFAULT_OPTIONS[name])
