"""
eNom response objects
Parsed 'interface_response' documents with accessors for the common fields,
plus a registry mapping each command to its response class
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Type

from enom_client.utils.logger import get_logger

logger = get_logger(__name__)

_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


def to_int(value: Any) -> int:
    """
    Coerce a provider value to int the permissive way: leading digits are
    used ('210 ' -> 210), anything else including None gives 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value)) if value is not None else None
    if not match:
        if value not in (None, ""):
            logger.debug(f"Non-numeric value {value!r} treated as 0")
        return 0
    return int(match.group(1))


class Response(dict):
    """
    Response from an eNom command.

    A plain dict of the fields under 'interface_response', so any
    provider field is reachable by key, with typed accessors for the
    fields every command returns.
    """

    @property
    def err_count(self) -> int:
        return to_int(self.get("ErrCount"))

    @property
    def rrp_code(self) -> int:
        return to_int(self.get("RRPCode"))

    @property
    def rrp_text(self) -> Optional[str]:
        return self.get("RRPText")

    @property
    def command(self) -> Optional[str]:
        return self.get("Command")

    def errors(self) -> List[str]:
        """
        Error messages reported by eNom, in order.

        Reads Err1..ErrN from the 'errors' block where N is ErrCount.
        Entries missing from the block are skipped; empty ones (<Err1/>)
        are kept as '' so the count eNom reported is preserved.
        """
        block = self.get("errors") or {}
        if not isinstance(block, Mapping):
            return []
        messages = []
        for i in range(1, self.err_count + 1):
            key = f"Err{i}"
            if key in block:
                message = block[key]
                messages.append("" if message is None else str(message))
        return messages

    def has_errors(self) -> bool:
        return bool(self.errors())

    def __repr__(self):
        return f"{self.__class__.__name__}({dict.__repr__(self)})"


# Command name -> response class; commands not listed get Response
RESPONSE_CLASSES: Dict[str, Type[Response]] = {}


def register_response_class(command: str):
    """Class decorator registering a Response subclass for a command"""
    def decorator(cls: Type[Response]) -> Type[Response]:
        RESPONSE_CLASSES[command] = cls
        return cls
    return decorator


@register_response_class("check")
class CheckResponse(Response):
    """Response for the 'check' command"""

    DOMAIN_AVAILABLE_CODE = 210

    def is_available(self) -> bool:
        """True when RRPCode is 210; malformed codes count as unavailable"""
        return self.rrp_code == self.DOMAIN_AVAILABLE_CODE


def response_class_for(command: str) -> Type[Response]:
    return RESPONSE_CLASSES.get(command, Response)


def build_response(command: str, data: Optional[Mapping[str, Any]]) -> Response:
    """Wrap a parsed 'interface_response' mapping in the command's response class"""
    return response_class_for(command)(data or {})
