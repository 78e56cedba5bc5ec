"""
eNom API Connection
Builds authenticated requests for eNom commands and wraps the XML responses
"""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple
from urllib.parse import urlencode

import requests

from enom_client.api.commands import RESERVED_OPTIONS, default_options
from enom_client.api.responses import CheckResponse, Response, build_response
from enom_client.api.xml_parser import extract_interface_response, parse_xml
from enom_client.exceptions import CommandError, ConfigurationError, DomainError, TransportError
from enom_client.utils import config as client_config
from enom_client.utils.config import Settings, get_settings
from enom_client.utils.validators import ALLOWED_TLDS, get_sld_and_tld, is_valid_tld


class Connection:
    """
    Connection to the eNom reseller interface.

    Credentials and URL are fixed at construction. TLD strictness, the
    recognized TLDs and the logger can be given per connection; when left
    as None the process-wide values from enom_client.utils.config are used
    at call time.
    """

    REQUEST_TIMEOUT = 30

    def __init__(
        self,
        username: str,
        password: str,
        url: str,
        allow_any_tld: Optional[bool] = None,
        allowed_tlds: Optional[Sequence[str]] = None,
        logger: Optional[logging.Logger] = None
    ):
        self._username = username
        self._password = password
        self._url = url
        self._allow_any_tld = allow_any_tld
        self._allowed_tlds = tuple(allowed_tlds) if allowed_tlds else ALLOWED_TLDS
        self._logger = logger

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, logger: Optional[logging.Logger] = None) -> "Connection":
        """
        Create a connection from Settings.

        Args:
            settings: Optional Settings instance. Uses get_settings() if None.
            logger: Optional logger for this connection
        """
        settings = settings or get_settings()
        return cls(
            settings.enom_username,
            settings.enom_password,
            settings.enom_base_url,
            allow_any_tld=settings.enom_allow_any_tld,
            allowed_tlds=settings.enom_allowed_tlds,
            logger=logger
        )

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    @property
    def url(self) -> str:
        return self._url

    @property
    def allowed_tlds(self) -> Tuple[str, ...]:
        return self._allowed_tlds

    @property
    def allow_any_tld(self) -> bool:
        if self._allow_any_tld is not None:
            return self._allow_any_tld
        return client_config.get_allow_any_tld()

    @property
    def logger(self) -> logging.Logger:
        return self._logger or client_config.get_default_logger()

    def __repr__(self):
        return f"Connection(username={self._username!r}, url={self._url!r})"

    # Commands

    def check(self, options: Optional[Mapping[str, Any]] = None, **kwargs) -> CheckResponse:
        """
        Check domain availability.

        Args:
            options: eNom options, usually 'sld' and 'tld'
            **kwargs: Extra options, override entries of ``options``

        Returns:
            CheckResponse
        """
        return self.execute("check", {**(options or {}), **kwargs})

    def purchase(self, options: Optional[Mapping[str, Any]] = None, **kwargs) -> Response:
        """
        Register a domain.

        Args:
            options: eNom options ('sld', 'tld', 'NumYears', registrant fields...)
            **kwargs: Extra options, override entries of ``options``

        Returns:
            Response
        """
        return self.execute("purchase", {**(options or {}), **kwargs})

    def domain_available(self, domain: str) -> bool:
        """
        Check whether a domain can be registered.

        Args:
            domain: Domain name (e.g., 'example.com')

        Returns:
            True if eNom reports the domain as available

        Raises:
            ConfigurationError: If any TLD is allowed, since the domain
                cannot be split without the recognized TLD list
            DomainError: If the domain has no recognized TLD
            CommandError: If eNom reports errors
        """
        if self.allow_any_tld:
            raise ConfigurationError(
                "You need to enable TLD validation "
                "(set_allow_any_tld(False) or allow_any_tld=False) to check domain availability"
            )

        sld, tld = get_sld_and_tld(domain, self.allowed_tlds)
        response = self.check(sld=sld, tld=tld)
        if response.has_errors():
            errors = response.errors()
            raise CommandError(
                f"The command returned errors: {'. '.join(errors)}",
                errors=errors,
                response=response
            )
        return response.is_available()

    def execute(self, command: str, options: Optional[Mapping[str, Any]] = None) -> Response:
        """
        Run an eNom command.

        Args:
            command: Name of a command in the command table
            options: Caller options, merged over the command defaults

        Returns:
            Response subclass registered for the command

        Raises:
            ValueError: If the command is unknown or a reserved option is given
            DomainError: If a 'tld' option is not recognized
            TransportError: If the HTTP request fails
            ParseError: If the body is not an eNom XML response
        """
        options = dict(options or {})
        self.logger.info(f"About to execute eNom command '{command}' with options {options!r}")

        full_options = self._full_options(command, options)
        self._validate_options(full_options)

        body = self._get(self._make_url(full_options))
        self.logger.debug(f"Response from eNom: {body!r}")

        document = parse_xml(body)
        return build_response(command, extract_interface_response(document))

    # Helpers

    def _required_options(self) -> Dict[str, str]:
        return {"uid": self._username, "pw": self._password, "responsetype": "xml"}

    def _full_options(self, command: str, options: Dict[str, Any]) -> Dict[str, str]:
        reserved = [key for key in options if key in RESERVED_OPTIONS]
        if reserved:
            raise ValueError(
                f"Options {', '.join(reserved)} are set by the connection and cannot be overridden"
            )

        merged: Dict[str, Any] = {
            **self._required_options(),
            "command": command,
            **default_options(command),
            **options,
        }
        return {key: "" if value is None else str(value) for key, value in merged.items()}

    def _validate_options(self, options: Mapping[str, str]) -> None:
        tld = options.get("tld")
        if tld is not None and not is_valid_tld(tld, self.allowed_tlds, self.allow_any_tld):
            raise DomainError(
                f"Specified TLD ({tld}) is not on the list of supported TLDs: "
                f"{', '.join(self.allowed_tlds)}."
            )

    def _make_url(self, options: Mapping[str, str]) -> str:
        if not options:
            return self._url
        return f"{self._url}?{urlencode(options)}"

    def _get(self, url: str) -> bytes:
        """
        Perform the GET request.

        Raises:
            TransportError: On network failure or a non-2xx status
        """
        try:
            response = requests.get(url, timeout=self.REQUEST_TIMEOUT)
        except requests.exceptions.Timeout:
            raise TransportError(f"Request timed out after {self.REQUEST_TIMEOUT} seconds")
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Connection error: {str(e)}")
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Network error: {str(e)}")

        if not 200 <= response.status_code < 300:
            raise TransportError(
                f"Unexpected HTTP status from eNom: {response.text or response.reason}",
                status_code=response.status_code
            )
        return response.content
