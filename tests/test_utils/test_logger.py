from __future__ import annotations

import io
import os
import logging
from unittest.mock import MagicMock, patch

import pytest

from ghcpick.utils.logger import (
    LevelColorFormatter,
    get_logger,
    setup_logging,
    stream_supports_color,
    verbosity_to_level,
)


def _record(level: int = logging.INFO, msg: str = "message") -> logging.LogRecord:
    return logging.LogRecord(
        name="ghcpick.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def _tty() -> MagicMock:
    stream = MagicMock()
    stream.isatty.return_value = True
    return stream


@pytest.mark.unit
class TestLevelColorFormatter:
    """Tests for LevelColorFormatter."""

    def test_colors_level_name(self) -> None:
        """Test levelname is wrapped in ANSI codes when color is on."""
        formatter = LevelColorFormatter("%(levelname)s: %(message)s", use_color=True)

        result = formatter.format(_record())

        assert result == (
            f"{LevelColorFormatter.COLORS['INFO']}INFO"
            f"{LevelColorFormatter.RESET}: message"
        )

    def test_plain_when_color_off(self) -> None:
        """Test no ANSI codes are added when color is off."""
        formatter = LevelColorFormatter("%(levelname)s: %(message)s")

        assert formatter.format(_record(logging.WARNING)) == "WARNING: message"

    def test_record_left_untouched(self) -> None:
        """Test coloring does not leak into the record seen by other handlers."""
        formatter = LevelColorFormatter("%(levelname)s: %(message)s", use_color=True)
        record = _record(logging.ERROR)

        formatter.format(record)

        assert record.levelname == "ERROR"


@pytest.mark.unit
class TestStreamSupportsColor:
    """Tests for stream_supports_color."""

    def test_tty_without_overrides(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert stream_supports_color(_tty()) is True

    @pytest.mark.parametrize("var", ["NO_COLOR", "CI"])
    def test_environment_disables(self, var: str) -> None:
        """Test NO_COLOR and CI override a terminal."""
        with patch.dict(os.environ, {var: "1"}, clear=True):
            assert stream_supports_color(_tty()) is False

    def test_non_tty(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert stream_supports_color(io.StringIO()) is False

    def test_isatty_raises(self) -> None:
        """Test isatty() failures fall back to no color."""
        stream = MagicMock()
        stream.isatty.side_effect = OSError("closed")

        with patch.dict(os.environ, {}, clear=True):
            assert stream_supports_color(stream) is False


@pytest.mark.unit
class TestVerbosityToLevel:
    """Tests for the -v count mapping."""

    @pytest.mark.parametrize(
        "verbosity,expected",
        [
            (-1, logging.WARNING),
            (0, logging.WARNING),
            (1, logging.INFO),
            (2, logging.DEBUG),
            (7, logging.DEBUG),
        ],
    )
    def test_mapping(self, verbosity: int, expected: int) -> None:
        assert verbosity_to_level(verbosity) == expected


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_installs_single_handler(self) -> None:
        """Test repeated setup keeps exactly one handler."""
        stream = io.StringIO()

        setup_logging(2, stream=stream)
        level = setup_logging(1, stream=stream)

        root = logging.getLogger("ghcpick")
        assert level == logging.INFO
        assert len(root.handlers) == 1
        assert root.level == logging.INFO
        assert root.propagate is False

    def test_messages_reach_stream(self) -> None:
        """Test child loggers write through the configured handler."""
        stream = io.StringIO()
        setup_logging(1, stream=stream)

        get_logger("core.resolver").info("picked %s", "9.6.4")

        assert stream.getvalue() == "INFO: picked 9.6.4\n"

    def test_default_hides_info(self) -> None:
        """Test no -v flag only lets warnings through."""
        stream = io.StringIO()
        setup_logging(0, stream=stream)

        get_logger("cli").info("hidden")
        get_logger("cli").warning("shown")

        assert stream.getvalue() == "WARNING: shown\n"

    def test_debug_uses_verbose_format(self) -> None:
        """Test -vv includes the logger name."""
        stream = io.StringIO()
        setup_logging(2, stream=stream)

        get_logger("cli").debug("hello")

        assert "ghcpick.cli - DEBUG - hello" in stream.getvalue()

    def test_no_color_on_terminal(self) -> None:
        """Test NO_COLOR keeps ANSI codes out even on a terminal."""
        stream = _tty()
        with patch.dict(os.environ, {"NO_COLOR": "1"}):
            setup_logging(1, stream=stream)

        handler = logging.getLogger("ghcpick").handlers[0]
        assert handler.formatter.use_color is False


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger naming."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            (None, "ghcpick"),
            ("ghcpick", "ghcpick"),
            ("cli", "ghcpick.cli"),
            ("ghcpick.core.lister", "ghcpick.core.lister"),
        ],
    )
    def test_namespacing(self, name: str, expected: str) -> None:
        """Test names are placed under the ghcpick hierarchy."""
        assert get_logger(name).name == expected
