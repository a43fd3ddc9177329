"""Tests for writing plugin pages to disk."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from plugin_docs.build_type_index import build_type_index
from plugin_docs.declaration_node import parse_declaration
from plugin_docs.load_config import DEFAULT_CONFIG
from plugin_docs.write_plugin_pages import write_plugin_pages


def _declarations() -> list:
    return [
        parse_declaration({"id": 1, "name": "LocalNotificationsPlugin"}),
        parse_declaration({"id": 2, "name": "CameraPlugin"}),
        parse_declaration({"id": 3, "name": "CameraOptions"}),
    ]


def test_writes_one_page_per_plugin(tmp_path: Path) -> None:
    """Verify that only plugins are written, each under its output key."""
    decls = _declarations()
    written, failed = write_plugin_pages(
        decls, build_type_index(decls), DEFAULT_CONFIG, tmp_path
    )
    assert written == 2
    assert failed == []
    page = tmp_path / "local-notifications" / "api.html"
    assert "LocalNotificationsPlugin" in page.read_text(encoding="utf-8")
    assert (tmp_path / "camera" / "api.html").exists()
    assert not (tmp_path / "camera-options").exists()


def test_write_failure_does_not_stop_others(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a failed write is logged and later plugins still get written."""
    decls = _declarations()
    original = Path.write_text

    def failing_write(self: Path, *args: object, **kwargs: object) -> int:
        if self.parent.name == "local-notifications":
            raise PermissionError("read-only")
        return original(self, *args, **kwargs)  # type: ignore[arg-type]

    with (
        patch.object(Path, "write_text", failing_write),
        caplog.at_level(logging.ERROR),
    ):
        written, failed = write_plugin_pages(
            decls, build_type_index(decls), DEFAULT_CONFIG, tmp_path
        )

    assert written == 1
    assert failed == ["LocalNotificationsPlugin"]
    assert (tmp_path / "camera" / "api.html").exists()
    assert "Unable to write docs for plugin local-notifications" in caplog.text


def test_unusable_plugin_name_is_skipped(tmp_path: Path) -> None:
    """Verify that a name without words is reported and skipped."""
    decls = [
        parse_declaration({"id": 1, "name": "webplugin"}),
        parse_declaration({"id": 2, "name": "CameraPlugin"}),
    ]
    config = {**DEFAULT_CONFIG, "plugin_suffix": "lugin"}
    written, failed = write_plugin_pages(
        decls, build_type_index(decls), config, tmp_path
    )
    assert written == 1
    assert failed == ["webplugin"]
    assert (tmp_path / "camera" / "api.html").exists()


def test_dry_run_writes_nothing(tmp_path: Path) -> None:
    """Verify that a dry run renders but leaves the filesystem untouched."""
    decls = _declarations()
    written, failed = write_plugin_pages(
        decls, build_type_index(decls), DEFAULT_CONFIG, tmp_path, dry_run=True
    )
    assert written == 0
    assert failed == []
    assert list(tmp_path.iterdir()) == []
