"""Asset bundles for hot code push clients.

This package models downloaded versions of a web application's static
assets: it decides which files of a new version must be materialized and
which are already available from a previously installed version, and
exposes the runtime config embedded in the bundle's index document.
"""

# Core library interface
from .asset import Asset
from .bundle import INDEX_FILENAME, MANIFEST_FILENAME, AssetBundle
from .manifest import AssetManifest, ManifestEntry

# Runtime config extraction
from .runtime_config import RUNTIME_CONFIG_PATTERN, extract_runtime_config, load_runtime_config

# Core utilities
from .core import UrlPath, url_path_of, validate_program, validate_program_with_error_details

# Errors
from .errors import (
    AssetBundleError,
    ManifestError,
    ManifestLoadError,
    RuntimeConfigError,
    RuntimeConfigNotFound,
)

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "Asset",
    "AssetBundle",
    "AssetManifest",
    "ManifestEntry",
    "INDEX_FILENAME",
    "MANIFEST_FILENAME",
    # Runtime config
    "RUNTIME_CONFIG_PATTERN",
    "extract_runtime_config",
    "load_runtime_config",
    # Core utilities
    "UrlPath",
    "url_path_of",
    "validate_program",
    "validate_program_with_error_details",
    # Errors
    "AssetBundleError",
    "ManifestError",
    "ManifestLoadError",
    "RuntimeConfigError",
    "RuntimeConfigNotFound",
]
