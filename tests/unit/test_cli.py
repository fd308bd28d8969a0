"""Unit tests for the command-line interface."""

from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from docs_server import __version__
from docs_server.cli.main import cli


class TestCLI:
    """Test mode selection and option handling."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_version(self):
        with patch("docs_server.cli.main.console") as console:
            result = self.runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        console.print.assert_called_once_with(f"Docs Server v{__version__}")

    def test_http_mode_by_default(self):
        with (
            patch("docs_server.cli.main.setup_logging"),
            patch("docs_server.api.main.run_http") as run_http,
        ):
            result = self.runner.invoke(cli, ["--port", "8123", "--host", "127.0.0.1"])

        assert result.exit_code == 0
        config = run_http.call_args.args[0]
        assert config.port == 8123
        assert config.host == "127.0.0.1"

    def test_stdio_mode(self):
        """Test --stdio runs the stdio server instead of HTTP."""
        with (
            patch("docs_server.cli.main.setup_logging"),
            patch("docs_server.mcp_server.main.run_stdio", new_callable=AsyncMock) as run_stdio,
            patch("docs_server.api.main.run_http") as run_http,
        ):
            result = self.runner.invoke(cli, ["--stdio", "--log-level", "debug"])

        assert result.exit_code == 0
        run_stdio.assert_awaited_once()
        assert run_stdio.call_args.args[0].log_level == "DEBUG"
        run_http.assert_not_called()

    def test_invalid_port_exits_with_error(self):
        with patch("docs_server.api.main.run_http") as run_http:
            result = self.runner.invoke(cli, ["--port", "0"])

        assert result.exit_code == 1
        run_http.assert_not_called()
