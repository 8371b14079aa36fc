"""Tests for settings, styles and the shape registry."""

import io
import logging

import pytest

from shapedrawer.config import Settings, get_settings
from shapedrawer.core import AnchorEditor, AnchorStyle, LineStyle, OvalEditor, QuadrilateralEditor, RectangleEditor
from shapedrawer.core import Frame, QuadCorner, shape_registry, register_shape
from shapedrawer.logging_config import configure_logging


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.hit_tolerance == 8.0
        assert settings.curve_samples == 32
        assert settings.frame_edge_size == 44.0

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHAPEDRAWER_HIT_TOLERANCE", "3.5")
        monkeypatch.setenv("SHAPEDRAWER_FRAME_EDGE_SIZE", "20")
        assert get_settings().hit_tolerance == 3.5
        assert RectangleEditor(Frame(0.0, 0.0, 10.0, 10.0)).edge_size == 20.0

    def test_editor_picks_up_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHAPEDRAWER_HIT_TOLERANCE", "1")
        editor = AnchorEditor([(0.0, 0.0), (10.0, 0.0)], line_style=LineStyle(width=0.5))
        assert editor.tolerance == 1.0

    def test_anchor_hit_radius_defaults_to_marker_size(self) -> None:
        assert Settings().anchor_hit_radius is None
        assert AnchorEditor([(0.0, 0.0), (100.0, 0.0)]).grab_radius == 7.5
        assert QuadrilateralEditor(100.0, 100.0).corner_at((20.0, 0.0)) is None

    def test_anchor_hit_radius_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHAPEDRAWER_ANCHOR_HIT_RADIUS", "30")
        assert AnchorEditor([(0.0, 0.0), (100.0, 0.0)]).anchor_at((20.0, 0.0)) == 0
        assert QuadrilateralEditor(100.0, 100.0).corner_at((20.0, 0.0)) is QuadCorner.TOP_LEFT

    def test_explicit_radius_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHAPEDRAWER_ANCHOR_HIT_RADIUS", "30")
        editor = AnchorEditor([(0.0, 0.0), (100.0, 0.0)], anchor_hit_radius=5.0)
        assert editor.anchor_at((20.0, 0.0)) is None
        assert editor.anchor_at((20.0, 0.0), radius=25.0) == 0

    def test_cached(self) -> None:
        assert get_settings() is get_settings()


class TestStyles:
    def test_line_style_defaults(self) -> None:
        style = LineStyle()
        assert style.color == (0, 0, 0, 255)
        assert style.width == 4.0

    def test_anchor_style_defaults(self) -> None:
        style = AnchorStyle()
        assert style.size == (15.0, 15.0)
        assert style.corner_radius == 7.5
        assert style.border_width == 3.0
        assert style.hit_radius == 7.5

    def test_with_returns_copy(self) -> None:
        style = LineStyle()
        wider = style.with_(width=8.0)
        assert wider.width == 8.0
        assert style.width == 4.0


class TestRegistry:
    def test_builtin_shapes(self) -> None:
        assert shape_registry["curve"] is AnchorEditor
        assert shape_registry["quadrilateral"] is QuadrilateralEditor
        assert shape_registry["rectangle"] is RectangleEditor
        assert shape_registry["oval"] is OvalEditor

    def test_duplicate_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            register_shape("curve")(type("Other", (), {}))

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            register_shape("")(type("Other", (), {}))


class TestConfigureLogging:
    def test_writes_to_stream(self, restore_root_logger: logging.Logger) -> None:
        stream = io.StringIO()
        configure_logging(log_level="DEBUG", stream=stream)
        logging.getLogger("shapedrawer.test").debug("hello curve")
        assert "hello curve" in stream.getvalue()
        assert "[shapedrawer.test]" in stream.getvalue()

    def test_level_filters(self, restore_root_logger: logging.Logger) -> None:
        stream = io.StringIO()
        configure_logging(log_level=logging.WARNING, stream=stream)
        logging.getLogger("shapedrawer.test").info("quiet")
        assert stream.getvalue() == ""

    def test_replaces_handlers(self, restore_root_logger: logging.Logger) -> None:
        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())
        assert len(restore_root_logger.handlers) == 1

    def test_unknown_level(self, restore_root_logger: logging.Logger) -> None:
        with pytest.raises(ValueError):
            configure_logging(log_level="LOUD")
