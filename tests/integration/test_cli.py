"""CLI integration tests.

Runs the Typer application against real files in a temporary directory.
"""

import base64
import logging
import re
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import structlog
from typer.testing import CliRunner

from font2css import __version__
from font2css.cli.app import EXIT_PARTIAL, app

FONT_BYTES = b"\x00\x01\x00\x00\x00\x0e\x00\x80\x00\x03\x00`OS/2"


@pytest.fixture
def runner() -> CliRunner:
    """Typer test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def mock_logging():
    """Keep CLI runs from installing global log handlers or printing logs."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    try:
        with patch("font2css.cli.app.configure_logging") as mock_configure:
            mock_configure.return_value = Mock()
            yield mock_configure
    finally:
        structlog.reset_defaults()


@pytest.fixture
def fonts_dir(tmp_path: Path) -> Path:
    """Directory with two fonts, a sub-directory and a non-font file."""
    root = tmp_path / "fonts"
    (root / "extra").mkdir(parents=True)
    (root / "OpenSans-Bold.ttf").write_bytes(FONT_BYTES)
    (root / "extra" / "OpenSans-Bold-Italic.woff2").write_bytes(FONT_BYTES)
    (root / "README.txt").write_text("ignore me")
    return root


class TestConvert:
    """Tests for the default conversion command."""

    def test_single_file(self, runner: CliRunner, fonts_dir: Path, tmp_path: Path):
        """Test a single font becomes a CSS file with an embedded font."""
        out = tmp_path / "out"
        result = runner.invoke(app, [str(fonts_dir / "OpenSans-Bold.ttf"), "-o", str(out)])

        assert result.exit_code == 0, result.output
        css = (out / "OpenSans-Bold.css").read_text()
        assert css.startswith('@font-face{font-weight:700;font-family:"OpenSans";src:url(data:font/ttf;')

        payload = re.search(r"base64,([^)]*)\)", css).group(1)
        assert base64.b64decode(payload) == FONT_BYTES

    def test_directory(self, runner: CliRunner, fonts_dir: Path, tmp_path: Path):
        """Test a directory is converted recursively, skipping non-fonts."""
        out = tmp_path / "out"
        result = runner.invoke(app, [str(fonts_dir), "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert (out / "OpenSans-Bold.css").is_file()
        assert (out / "extra" / "OpenSans-Bold-Italic.css").is_file()
        assert not (out / "README.css").exists()
        assert not list(out.rglob("*.ttf"))

    def test_dest(self, runner: CliRunner, fonts_dir: Path, tmp_path: Path):
        """Test --dest references fonts instead of embedding them."""
        out = tmp_path / "out"
        result = runner.invoke(
            app, [str(fonts_dir / "OpenSans-Bold.ttf"), "-o", str(out), "--dest", "fonts/"]
        )

        assert result.exit_code == 0, result.output
        assert (out / "OpenSans-Bold.css").read_text() == (
            '@font-face{font-weight:700;font-family:"OpenSans";src:url(fonts/OpenSans-Bold.ttf);}'
        )

    def test_bundle(self, runner: CliRunner, fonts_dir: Path, tmp_path: Path):
        """Test --bundle writes a single stylesheet."""
        out = tmp_path / "out"
        result = runner.invoke(
            app, [str(fonts_dir), "-o", str(out), "--bundle", "fonts.css", "--dest", "/f/"]
        )

        assert result.exit_code == 0, result.output
        assert [p.name for p in out.iterdir()] == ["fonts.css"]
        lines = (out / "fonts.css").read_text().splitlines()
        assert lines == [
            '@font-face{font-weight:700;font-family:"OpenSans";src:url(/f/OpenSans-Bold.ttf);}',
            "@font-face{font-style:italic;font-weight:700;font-family:\"OpenSans\";"
            "src:url(/f/OpenSans-Bold-Italic.woff2);}",
        ]

    def test_pattern(self, runner: CliRunner, fonts_dir: Path, tmp_path: Path):
        """Test --pattern restricts directory matches."""
        out = tmp_path / "out"
        result = runner.invoke(app, [str(fonts_dir), "-o", str(out), "-p", "*.woff2"])

        assert result.exit_code == 0, result.output
        assert not (out / "OpenSans-Bold.css").exists()
        assert (out / "extra" / "OpenSans-Bold-Italic.css").is_file()

    def test_stream_reports_errors(self, runner: CliRunner, fonts_dir: Path, tmp_path: Path):
        """Test --stream reports one error per file and writes nothing."""
        out = tmp_path / "out"
        result = runner.invoke(app, [str(fonts_dir), "-o", str(out), "--stream"])

        assert result.exit_code == EXIT_PARTIAL
        assert result.output.count("Streaming is not supported") == 2
        assert not list(out.rglob("*.css"))

    def test_partial_failure_keeps_other_files(
        self, runner: CliRunner, fonts_dir: Path, tmp_path: Path
    ):
        """Test one failing file does not stop the others."""
        (fonts_dir / "broken!").write_bytes(FONT_BYTES)
        out = tmp_path / "out"
        result = runner.invoke(
            app,
            [str(fonts_dir / "broken!"), str(fonts_dir / "OpenSans-Bold.ttf"), "-o", str(out), "-d", "f/"],
        )

        assert result.exit_code == EXIT_PARTIAL
        assert (out / "OpenSans-Bold.css").is_file()


class TestCliErrors:
    """Tests for fatal CLI errors."""

    def test_missing_input(self, runner: CliRunner, tmp_path: Path):
        """Test a missing input exits with code 1."""
        result = runner.invoke(app, [str(tmp_path / "nope.ttf")])
        assert result.exit_code == 1
        assert "Input not found" in result.output

    def test_verbose_and_quiet(self, runner: CliRunner, fonts_dir: Path):
        """Test --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, [str(fonts_dir), "-v", "-q"])
        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output

    def test_version(self, runner: CliRunner):
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_quiet(self, runner: CliRunner, fonts_dir: Path, tmp_path: Path):
        """Test --quiet prints nothing on success."""
        out = tmp_path / "out"
        result = runner.invoke(app, [str(fonts_dir), "-o", str(out), "-q"])
        assert result.exit_code == 0
        assert result.output.strip() == ""
        assert (out / "OpenSans-Bold.css").is_file()

    def test_logging_configured(
        self, runner: CliRunner, fonts_dir: Path, tmp_path: Path, mock_logging: Mock
    ):
        """Test logging options are forwarded."""
        log_file = tmp_path / "run.log"
        runner.invoke(
            app,
            [str(fonts_dir), "-o", str(tmp_path / "out"), "--log-file", str(log_file),
             "--log-level", "INFO"],
        )
        mock_logging.assert_called_once_with(
            log_file=log_file,
            console_level="INFO",
            file_level="DEBUG",
            quiet=False,
        )

    def test_console_logging_off_by_default(
        self, runner: CliRunner, fonts_dir: Path, tmp_path: Path, mock_logging: Mock
    ):
        """Test log records stay off the console unless --log-level is given."""
        runner.invoke(app, [str(fonts_dir), "-o", str(tmp_path / "out")])
        mock_logging.assert_called_once_with(
            log_file=None,
            console_level="WARNING",
            file_level="DEBUG",
            quiet=True,
        )

    def test_log_level_case_insensitive(
        self, runner: CliRunner, fonts_dir: Path, tmp_path: Path, mock_logging: Mock
    ):
        """Test a lowercase --log-level is accepted."""
        result = runner.invoke(
            app, [str(fonts_dir), "-o", str(tmp_path / "out"), "--log-level", "debug"]
        )
        assert result.exit_code == 0, result.output
        assert mock_logging.call_args.kwargs["console_level"] == "DEBUG"
        assert mock_logging.call_args.kwargs["quiet"] is False

    def test_invalid_log_level(
        self, runner: CliRunner, fonts_dir: Path, tmp_path: Path, mock_logging: Mock
    ):
        """Test an unknown --log-level exits with code 1 before logging starts."""
        out = tmp_path / "out"
        result = runner.invoke(app, [str(fonts_dir), "-o", str(out), "--log-level", "FOO"])

        assert result.exit_code == 1
        assert "Invalid log level: FOO" in result.output
        assert "Traceback" not in result.output
        mock_logging.assert_not_called()
        assert not out.exists()


class TestVerbose:
    """Tests for --verbose output."""

    def test_default_hides_details(self, runner: CliRunner, fonts_dir: Path, tmp_path: Path):
        """Test guessed attributes are not shown without --verbose."""
        result = runner.invoke(app, [str(fonts_dir), "-o", str(tmp_path / "out")])

        assert result.exit_code == 0, result.output
        assert 'font-family:"OpenSans";' not in result.output
        assert "(skipped)" not in result.output

    def test_verbose_shows_details(self, runner: CliRunner, fonts_dir: Path, tmp_path: Path):
        """Test --verbose lists guessed attributes and skipped entries."""
        result = runner.invoke(app, [str(fonts_dir), "-o", str(tmp_path / "out"), "-v"])

        assert result.exit_code == 0, result.output
        assert 'font-weight:700; font-family:"OpenSans";' in result.output
        assert 'font-style:italic; font-weight:700; font-family:"OpenSans";' in result.output
        assert "extra (skipped)" in result.output

    def test_verbose_with_bundle(self, runner: CliRunner, fonts_dir: Path, tmp_path: Path):
        """Test --verbose details are printed in bundle mode too."""
        result = runner.invoke(
            app, [str(fonts_dir), "-o", str(tmp_path / "out"), "-b", "fonts.css", "-v"]
        )

        assert result.exit_code == 0, result.output
        assert 'font-weight:700; font-family:"OpenSans";' in result.output
