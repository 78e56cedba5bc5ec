"""
Tests for the command-line interface.
The Connection is mocked, so no settings or network are needed.
"""

import pytest
from unittest.mock import MagicMock, patch

from enom_client.api.responses import CheckResponse, Response
from enom_client.cli.main import build_parser, main
from enom_client.exceptions import DomainError


CONNECTION = "enom_client.cli.main._connection"


class TestParser:

    def test_available_arguments(self):
        args = build_parser().parse_args(["available", "example.com"])
        assert args.domain == "example.com"

    def test_purchase_options_repeat(self):
        args = build_parser().parse_args([
            "purchase", "--sld", "example", "--tld", "com",
            "--option", "NumYears=2", "--option", "UseDNS=default",
        ])
        assert args.option == ["NumYears=2", "UseDNS=default"]

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestCommands:

    def test_available(self, capsys):
        connection = MagicMock()
        connection.domain_available.return_value = True
        with patch(CONNECTION, return_value=connection):
            main(["available", "example.com"])

        connection.domain_available.assert_called_once_with("example.com")
        assert "AVAILABLE" in capsys.readouterr().out

    def test_available_failure_exits(self):
        connection = MagicMock()
        connection.domain_available.side_effect = DomainError("bad domain")
        with patch(CONNECTION, return_value=connection):
            with pytest.raises(SystemExit) as exc_info:
                main(["available", "example.io"])
        assert exc_info.value.code == 1

    def test_check(self, capsys):
        connection = MagicMock()
        connection.check.return_value = CheckResponse({"RRPCode": "210", "ErrCount": "0"})
        with patch(CONNECTION, return_value=connection):
            main(["check", "--sld", "example", "--tld", "com"])

        connection.check.assert_called_once_with(sld="example", tld="com")
        out = capsys.readouterr().out
        assert "210" in out
        assert "YES" in out

    def test_purchase_passes_options(self):
        connection = MagicMock()
        connection.purchase.return_value = Response({"RRPCode": "200", "ErrCount": "0"})
        with patch(CONNECTION, return_value=connection):
            main(["purchase", "--sld", "example", "--tld", "com", "--option", "NumYears=2"])

        connection.purchase.assert_called_once_with({"sld": "example", "tld": "com", "NumYears": "2"})

    def test_purchase_with_reported_errors_exits(self, capsys):
        connection = MagicMock()
        connection.purchase.return_value = Response({
            "ErrCount": "1",
            "errors": {"Err1": "Insufficient funds"},
        })
        with patch(CONNECTION, return_value=connection):
            with pytest.raises(SystemExit):
                main(["purchase", "--sld", "example", "--tld", "com"])

        assert "Insufficient funds" in capsys.readouterr().out

    def test_purchase_rejects_malformed_option(self):
        with patch(CONNECTION) as mock_connection:
            with pytest.raises(SystemExit):
                main(["purchase", "--sld", "example", "--tld", "com", "--option", "NumYears"])
        mock_connection.assert_not_called()
