"""Core utilities shared by manifests and bundles.

This package contains the program.json type definitions, schema
validation, URL path normalization and the lazy value cell.
"""

from .memo import Memo
from .types import ProgramEntry, ProgramManifest
from .urls import UrlPath, url_path_of
from .validator import validate_program, validate_program_with_error_details

__all__ = [
    "Memo",
    "ProgramEntry",
    "ProgramManifest",
    "UrlPath",
    "url_path_of",
    "validate_program",
    "validate_program_with_error_details",
]
