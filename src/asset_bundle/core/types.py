"""Type definitions for program.json manifests.

This module defines TypedDict classes that mirror the JSON schema structure
defined in schemas/program.schema.json.
"""

from typing import TypedDict


class ProgramEntry(TypedDict, total=False):
    """Single file record in a program.json manifest."""

    where: str  # "client" for files served to the web view
    path: str  # Path relative to the bundle directory
    url: str  # URL the file is served under, may carry a query string
    type: str  # "js", "css", "asset", ...
    cacheable: bool
    hash: str | None
    size: int | None
    sourceMap: str | None  # Path of the source map file
    sourceMapUrl: str | None  # URL path of the source map


class ProgramManifest(TypedDict, total=False):
    """Complete program.json document."""

    format: str  # Manifest format, "web-program-pre1"
    version: str  # Bundle version
    cordovaCompatibilityVersions: dict[str, str]  # Platform -> compatibility version
    manifest: list[ProgramEntry]
