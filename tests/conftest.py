"""
Shared fixtures: clean process-wide configuration and canned eNom responses
"""

import pytest
from unittest.mock import MagicMock

from enom_client.utils import config


def _enom_xml(fields: str) -> bytes:
    """Wrap fields in an interface_response document."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f"<interface_response>{fields}</interface_response>"
    ).encode("utf-8")


def _http_response(body: bytes, status_code: int = 200) -> MagicMock:
    """Minimal stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.content = body
    response.text = body.decode("utf-8")
    response.reason = "OK" if status_code == 200 else "Error"
    return response


@pytest.fixture
def enom_xml():
    return _enom_xml


@pytest.fixture
def http_response():
    return _http_response


@pytest.fixture(autouse=True)
def clean_config():
    """Restore process-wide toggles and settings after every test."""
    yield
    config.set_allow_any_tld(False)
    config.set_default_logger(None)
    config.reset_settings()
