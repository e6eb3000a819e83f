"""Tests for the device code login script."""

import importlib.util
import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from traktkit import TraktDeviceCodeError

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "trakt_login.py"


@pytest.fixture
def trakt_login():
    """Load the script as a module."""
    spec = importlib.util.spec_from_file_location("trakt_login", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestTraktLogin:
    """Tests for the trakt_login script."""

    def test_parse_args(self, trakt_login):
        args = trakt_login.parse_args(["--client-id", "id", "--client-secret", "secret"])

        assert args.client_id == "id"
        assert args.client_secret == "secret"
        assert args.output is None

    def test_main_prints_token(self, trakt_login, capsys):
        token_json = json.dumps({"access_token": "a", "refresh_token": "r", "expires": 1})

        with (
            patch.object(trakt_login, "login", new=AsyncMock(return_value=token_json)),
            patch.object(trakt_login, "configure_logging"),
        ):
            exit_code = trakt_login.main(["--client-id", "id"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == json.loads(token_json)

    def test_main_writes_output(self, trakt_login, tmp_path):
        output = tmp_path / "token.json"

        with (
            patch.object(trakt_login, "login", new=AsyncMock(return_value='{"access_token": "a"}')),
            patch.object(trakt_login, "configure_logging"),
        ):
            exit_code = trakt_login.main(["--output", str(output)])

        assert exit_code == 0
        assert json.loads(output.read_text()) == {"access_token": "a"}

    def test_main_reports_failure(self, trakt_login, capsys):
        error = TraktDeviceCodeError(418, "Denied - user explicitly denied this code")

        with (
            patch.object(trakt_login, "login", new=AsyncMock(side_effect=error)),
            patch.object(trakt_login, "configure_logging"),
        ):
            exit_code = trakt_login.main([])

        assert exit_code == 1
        assert "Denied" in capsys.readouterr().err
