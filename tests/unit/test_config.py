"""Unit tests for configuration and logging utilities."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from vecpath.config import (
    GeometryConfig,
    TriangulationConfig,
    VecPathSettings,
    get_default_settings,
)
from vecpath.domain import DrawFilledRect, DrawFilledTriangles, Point, Triangle
from vecpath.utils import FrameLogger, configure_logging, get_logger
from vecpath.utils.logging import CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME


class TestSettings:
    """Tests for pydantic settings models."""

    def test_defaults(self) -> None:
        settings = get_default_settings()
        assert settings.geometry.hairline_width == 1.0
        assert settings.geometry.epsilon == 1e-9
        assert settings.geometry.collinear_tolerance == 1e-6
        assert settings.triangulation.large_polygon_threshold == 500
        assert settings.logging.log_level == "WARNING"
        assert settings.logging.log_file is None

    def test_is_hairline(self) -> None:
        config = GeometryConfig()
        assert config.is_hairline(1.0)
        assert not config.is_hairline(1.5)

    def test_invalid_epsilon(self) -> None:
        with pytest.raises(ValidationError):
            GeometryConfig(epsilon=0.0)

    def test_invalid_arc_resolution(self) -> None:
        with pytest.raises(ValidationError):
            GeometryConfig(arc_resolution=100.0)

    def test_invalid_threshold(self) -> None:
        with pytest.raises(ValidationError):
            TriangulationConfig(large_polygon_threshold=2)

    def test_nested_override(self) -> None:
        settings = VecPathSettings(geometry=GeometryConfig(arc_resolution=0.5))
        assert settings.geometry.arc_resolution == 0.5
        assert settings.triangulation.epsilon == 1e-9


class TestFrameLogger:
    """Tests for per-frame statistics."""

    def test_log_pass_accounts_commands(self) -> None:
        frame_logger = FrameLogger(get_logger("vecpath.test"))
        triangle = Triangle(Point(0, 0), Point(1, 0), Point(0, 1))
        frame_logger.log_pass("fill", [DrawFilledRect(0, 0, 1, 1), DrawFilledTriangles((triangle,))])
        frame_logger.log_pass("stroke", [])

        stats = frame_logger.stats
        assert stats.fill_passes == 1
        assert stats.stroke_passes == 1
        assert stats.empty_passes == 1
        assert stats.commands_issued == 2
        assert stats.points_emitted == 7
        assert stats.triangles_emitted == 3

    def test_duration_zero_before_end(self) -> None:
        frame_logger = FrameLogger(get_logger("vecpath.test"))
        frame_logger.log_frame_begin(10, 10)
        assert frame_logger.stats.duration_seconds == 0.0


class TestConfigureLogging:
    """Tests for repeated logging setup in one process."""

    @pytest.fixture(autouse=True)
    def restore_root_handlers(self):
        root = logging.getLogger()
        saved_handlers = list(root.handlers)
        saved_level = root.level
        yield
        for handler in list(root.handlers):
            if handler not in saved_handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(saved_level)

    def _own_handlers(self) -> list[logging.Handler]:
        names = (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME)
        return [h for h in logging.getLogger().handlers if h.get_name() in names]

    def test_repeated_calls_do_not_stack_handlers(self, tmp_path: Path) -> None:
        configure_logging(log_file=tmp_path / "a.log")
        configure_logging(log_file=tmp_path / "b.log")

        handlers = self._own_handlers()
        assert sorted(h.get_name() for h in handlers) == [CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME]

    def test_quiet_drops_console_handler(self) -> None:
        configure_logging()
        configure_logging(quiet=True)
        assert self._own_handlers() == []
