"""Shared fixtures for asset bundle tests."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest

RUNTIME_CONFIG_PAYLOAD = (
    "%7B%22appId%22%3A%22xyz%22%2C%22ROOT_URL%22%3A%22http%3A%2F%2Flocalhost%22%7D"
)


def index_html(payload: str = RUNTIME_CONFIG_PAYLOAD) -> str:
    """Index document embedding the given percent-encoded runtime config."""
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        '<script type="text/javascript">'
        f'__meteor_runtime_config__ = JSON.parse(decodeURIComponent("{payload}"))'
        "</script>\n"
        "</head>\n<body></body>\n</html>\n"
    )


def client_entry(
    path: str,
    url: str,
    file_type: str = "js",
    cacheable: bool = True,
    hash: str | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """program.json entry served to the client."""
    entry: dict[str, Any] = {
        "where": "client",
        "path": path,
        "url": url,
        "type": file_type,
        "cacheable": cacheable,
        "hash": hash,
    }
    entry.update(extra)
    return entry


def program_json(version: str, entries: list[dict[str, Any]], **extra: Any) -> dict[str, Any]:
    """Complete program.json document."""
    document: dict[str, Any] = {
        "format": "web-program-pre1",
        "version": version,
        "cordovaCompatibilityVersions": {"android": "compat-android", "ios": "compat-ios"},
        "manifest": entries,
    }
    document.update(extra)
    return document


@pytest.fixture
def make_bundle_dir(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a bundle directory with program.json and index.html."""

    def _make(
        name: str,
        document: dict[str, Any] | None = None,
        index: str | None = None,
    ) -> Path:
        directory = tmp_path / name
        directory.mkdir()
        if document is not None:
            (directory / "program.json").write_text(json.dumps(document), encoding="utf-8")
        if index is not None:
            (directory / "index.html").write_text(index, encoding="utf-8")
        return directory

    return _make
