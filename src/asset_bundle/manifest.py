"""Parsing of program.json asset manifests.

A manifest lists every file of one bundle version. Only entries served to
the client are kept; server-side entries are skipped.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema import ValidationError

from .core.types import ProgramEntry, ProgramManifest
from .core.validator import describe_validation_error, validate_program
from .errors import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FORMAT = "web-program-pre1"
DEFAULT_PLATFORM = "android"


@dataclass(frozen=True)
class ManifestEntry:
    """One client file listed in a manifest."""

    file_path: str
    url_path: str
    file_type: str
    cacheable: bool = False
    hash: str | None = None
    size: int | None = None
    source_map_file_path: str | None = None
    source_map_url_path: str | None = None

    @classmethod
    def from_program_entry(cls, entry: ProgramEntry) -> "ManifestEntry":
        return cls(
            file_path=entry["path"],
            url_path=entry["url"],
            file_type=entry["type"],
            cacheable=entry.get("cacheable", False),
            hash=entry.get("hash"),
            size=entry.get("size"),
            source_map_file_path=entry.get("sourceMap"),
            source_map_url_path=entry.get("sourceMapUrl"),
        )


@dataclass
class AssetManifest:
    """Parsed manifest of one bundle version.

    Attributes:
        version: Version string of the bundle
        cordova_compatibility_version: Native compatibility version for the
            selected platform, None when the manifest doesn't declare one
        entries: Client entries in manifest order
    """

    version: str
    cordova_compatibility_version: str | None = None
    entries: list[ManifestEntry] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls, document: Any, platform: str = DEFAULT_PLATFORM
    ) -> "AssetManifest":
        """Build a manifest from a decoded program.json document.

        Args:
            document: Decoded JSON document
            platform: Key looked up in ``cordovaCompatibilityVersions``

        Returns:
            The parsed manifest

        Raises:
            ManifestError: If the document fails schema validation or has an
                incompatible format
        """
        try:
            validate_program(document)
        except ValidationError as e:
            raise ManifestError(describe_validation_error(e)) from e

        program: ProgramManifest = document

        manifest_format = program.get("format")
        if manifest_format is not None and manifest_format != MANIFEST_FORMAT:
            raise ManifestError(
                f"The asset manifest format is incompatible: {manifest_format}"
            )

        compatibility = program.get("cordovaCompatibilityVersions", {}).get(platform)

        entries = [
            ManifestEntry.from_program_entry(entry)
            for entry in program["manifest"]
            if entry["where"] == "client"
        ]

        logger.debug(
            "Parsed manifest version %s with %d client entries",
            program["version"],
            len(entries),
        )

        return cls(
            version=program["version"],
            cordova_compatibility_version=compatibility,
            entries=entries,
        )

    @classmethod
    def from_json(cls, text: str, platform: str = DEFAULT_PLATFORM) -> "AssetManifest":
        """Parse raw program.json text.

        Raises:
            ManifestError: If the text is not valid JSON or not a valid manifest
        """
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ManifestError(f"Manifest is not valid JSON: {e}") from e
        return cls.from_dict(document, platform=platform)

    @classmethod
    def from_file(cls, path: Path, platform: str = DEFAULT_PLATFORM) -> "AssetManifest":
        """Read and parse a program.json file.

        Raises:
            OSError: If the file cannot be read
            ManifestError: If the content is not a valid manifest
        """
        with Path(path).open("r", encoding="utf-8") as f:
            return cls.from_json(f.read(), platform=platform)
