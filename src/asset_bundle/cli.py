"""Command-line interface for inspecting asset bundles.

This module provides the ``asset-bundle`` entry point, which reports how a
bundle directory relates to previously installed bundles and validates
program.json manifests.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .bundle import MANIFEST_FILENAME, AssetBundle
from .core.urls import url_path_of
from .core.validator import validate_program_with_error_details
from .errors import AssetBundleError
from .manifest import DEFAULT_PLATFORM


def build_chain(
    directory: Path,
    parents: list[Path],
    platform: str = DEFAULT_PLATFORM,
) -> AssetBundle:
    """Load a bundle on top of its ancestors.

    Args:
        directory: Directory of the newest bundle
        parents: Ancestor directories, oldest first
        platform: Platform used to select compatibility versions

    Returns:
        The bundle loaded from ``directory``

    Raises:
        ManifestLoadError: If any directory lacks a valid program.json
    """
    bundle: AssetBundle | None = None
    for parent_dir in parents:
        bundle = AssetBundle(parent_dir, parent_asset_bundle=bundle, platform=platform)
    return AssetBundle(directory, parent_asset_bundle=bundle, platform=platform)


def describe_bundle(bundle: AssetBundle) -> dict[str, Any]:
    """Summarize a bundle as a JSON-serializable dictionary."""
    own_url_paths = {asset.url_path for asset in bundle.get_own_assets()}

    inherited = []
    for entry in bundle.manifest.entries:
        url_path = url_path_of(entry.url_path)
        if url_path in own_url_paths:
            continue
        asset = bundle.asset_for_url_path(url_path)
        inherited.append(
            {
                "url_path": url_path,
                "from_version": asset.bundle.version if asset and asset.bundle else None,
            }
        )

    return {
        "version": bundle.version,
        "cordova_compatibility_version": bundle.cordova_compatibility_version,
        "directory": str(bundle.directory_uri),
        "app_id": bundle.get_app_id(),
        "root_url": bundle.get_root_url_string(),
        "own_assets": [
            {
                "url_path": asset.url_path,
                "file_path": asset.file_path,
                "file_type": asset.file_type,
                "hash": asset.hash,
            }
            for asset in sorted(bundle.get_own_assets(), key=lambda a: a.url_path)
        ],
        "inherited": inherited,
    }


def _inspect(args: argparse.Namespace) -> int:
    bundle = build_chain(
        Path(args.directory),
        [Path(p) for p in args.parent],
        platform=args.platform,
    )
    json.dump(describe_bundle(bundle), sys.stdout, indent=2)
    print()  # Add newline at end
    return 0


def _validate(args: argparse.Namespace) -> int:
    manifest_path = Path(args.directory) / MANIFEST_FILENAME
    try:
        document = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print(f"Error: Cannot read {manifest_path}: {e}", file=sys.stderr)
        return 1

    is_valid, error_msg = validate_program_with_error_details(document)
    if not is_valid:
        print("Error: Manifest validation failed:", file=sys.stderr)
        print(error_msg, file=sys.stderr)
        return 1

    print("Validation successful!", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the asset-bundle command."""
    parser = argparse.ArgumentParser(
        prog="asset-bundle",
        description="Inspect hot code push asset bundles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show what a downloaded version adds on top of the installed one
  asset-bundle inspect /data/versions/v2 --parent /app/www

  # Check a manifest before installing it
  asset-bundle validate /data/versions/v2
        """,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug events to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser("inspect", help="Describe a bundle as JSON")
    inspect_parser.add_argument("directory", help="Bundle directory containing program.json")
    inspect_parser.add_argument(
        "--parent",
        action="append",
        default=[],
        help="Ancestor bundle directory, oldest first (repeatable)",
    )
    inspect_parser.add_argument(
        "--platform",
        default=DEFAULT_PLATFORM,
        help=f"Compatibility version platform (default: {DEFAULT_PLATFORM})",
    )
    inspect_parser.set_defaults(handler=_inspect)

    validate_parser = subparsers.add_parser("validate", help="Validate program.json")
    validate_parser.add_argument("directory", help="Bundle directory containing program.json")
    validate_parser.set_defaults(handler=_validate)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return args.handler(args)
    except AssetBundleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
