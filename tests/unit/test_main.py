"""Unit tests for the entry point's server wiring.

Subprocesses and servers are mocked; only the commands and URLs are checked.
"""

import os
import sys
from unittest.mock import MagicMock, patch

import pytest

from gemini_chat.main import api_base_url, run_integrated, run_separate, separate_commands


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start each test without server settings, restoring them afterwards."""
    for var in ("HOST", "PORT", "UI_PORT", "API_BASE_URL"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)


class TestApiBaseUrl:
    @pytest.mark.parametrize("host", ["0.0.0.0", "::", ""])
    def test_wildcard_bind_uses_localhost(self, host: str) -> None:
        assert api_base_url(host, 8000) == "http://localhost:8000"

    def test_specific_address_is_used(self) -> None:
        assert api_base_url("10.1.2.3", 9000) == "http://10.1.2.3:9000"

    def test_ipv6_address_is_bracketed(self) -> None:
        assert api_base_url("fe80::1", 8000) == "http://[fe80::1]:8000"


class TestSeparateCommands:
    def test_defaults(self) -> None:
        api_cmd, ui_cmd, ui_env = separate_commands()

        assert api_cmd == [
            sys.executable,
            "-m",
            "uvicorn",
            "gemini_chat.api.app:app",
            "--host",
            "0.0.0.0",
            "--port",
            "8000",
        ]
        assert ui_cmd[-1] == "from gemini_chat.ui.chat_page import main; main()"
        assert ui_env["API_BASE_URL"] == "http://localhost:8000"

    def test_honours_host_and_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOST", "10.1.2.3")
        monkeypatch.setenv("PORT", "9001")

        api_cmd, _, ui_env = separate_commands()

        assert api_cmd[-4:] == ["--host", "10.1.2.3", "--port", "9001"]
        assert ui_env["API_BASE_URL"] == "http://10.1.2.3:9001"

    def test_api_runs_without_reload(self) -> None:
        api_cmd, _, _ = separate_commands()

        assert "--reload" not in api_cmd

    def test_explicit_api_base_url_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_BASE_URL", "https://chat.example.com")

        _, _, ui_env = separate_commands()

        assert ui_env["API_BASE_URL"] == "https://chat.example.com"


class TestRunSeparate:
    @patch("subprocess.Popen")
    def test_starts_both_and_stops_when_one_exits(self, mock_popen: MagicMock) -> None:
        mock_popen.return_value.poll.return_value = 0

        run_separate()

        api_call, ui_call = mock_popen.call_args_list
        assert api_call.args[0][3] == "gemini_chat.api.app:app"
        assert ui_call.kwargs["env"]["API_BASE_URL"] == "http://localhost:8000"
        assert mock_popen.return_value.terminate.call_count == 2
        assert mock_popen.return_value.wait.call_count == 2


class TestRunIntegrated:
    @patch("nicegui.ui.run_with")
    @patch("uvicorn.run")
    def test_points_page_at_bound_address(
        self,
        mock_uvicorn_run: MagicMock,
        mock_run_with: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("HOST", "10.1.2.3")
        monkeypatch.setenv("PORT", "9002")

        run_integrated()

        assert os.environ["API_BASE_URL"] == "http://10.1.2.3:9002"
        mock_run_with.assert_called_once()
        assert mock_uvicorn_run.call_args.kwargs["host"] == "10.1.2.3"
        assert mock_uvicorn_run.call_args.kwargs["port"] == 9002
