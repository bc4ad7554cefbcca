"""Asset bundle model.

An asset bundle is one downloaded version of a web application's static
files. A bundle only owns the assets that are new or changed relative to
its parent bundle; everything else is served by walking the parent chain.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from .asset import Asset
from .core.memo import Memo
from .core.urls import UrlPath, url_path_of
from .errors import ManifestError, ManifestLoadError
from .manifest import DEFAULT_PLATFORM, AssetManifest, ManifestEntry
from .runtime_config import RuntimeConfig, load_runtime_config

log = logging.getLogger(__name__)

MANIFEST_FILENAME = "program.json"
INDEX_FILENAME = "index.html"
INDEX_URL_PATH = UrlPath("/")


class AssetBundle:
    """One version of the application's assets.

    The bundle does not own its parent: the parent is shared between
    bundles and its lifetime is managed by whoever installed it.

    Example:
        >>> initial = AssetBundle(Path("/www/initial"))
        >>> update = AssetBundle(Path("/www/v2"), manifest, parent_asset_bundle=initial)
        >>> update.asset_for_url_path("/app.css")  # served from initial if unchanged
    """

    def __init__(
        self,
        directory_uri: Path | str,
        manifest: AssetManifest | None = None,
        parent_asset_bundle: "AssetBundle | None" = None,
        logger: logging.Logger | None = None,
        platform: str = DEFAULT_PLATFORM,
    ):
        """Create a bundle and compute the assets it owns.

        Args:
            directory_uri: Directory holding the bundle's files
            manifest: Already parsed manifest; loaded from program.json in
                the directory when omitted
            parent_asset_bundle: Previously installed bundle used to skip
                assets that did not change
            logger: Logger receiving bundle events
            platform: Platform used to select the compatibility version when
                the manifest is loaded from disk

        Raises:
            ManifestLoadError: If no manifest was given and program.json
                cannot be read or parsed
        """
        self.log = logger if logger is not None else log
        self.log.debug("Creating bundle object for %s", directory_uri)

        self.directory_uri = Path(directory_uri)
        self.parent_asset_bundle = parent_asset_bundle

        self._runtime_config: Memo[RuntimeConfig] = Memo()
        self._app_id: Memo[str] = Memo()
        self._root_url_string: Memo[str] = Memo()

        if manifest is None:
            self.log.debug("Loading my manifest from %s", directory_uri)
            manifest = self._load_asset_manifest(platform)
        self.manifest = manifest

        self.version = manifest.version
        self.cordova_compatibility_version = manifest.cordova_compatibility_version

        self._own_assets_by_url_path: dict[UrlPath, Asset] = {}

        # Only keep assets missing from the parent, the rest is served from it.
        for entry in manifest.entries:
            self._add_entry(entry)

        # The index document is never inherited.
        self.index_file = Asset(
            file_path=INDEX_FILENAME,
            url_path=INDEX_URL_PATH,
            file_type="html",
            cacheable=False,
            bundle=self,
        )
        self._add_asset(self.index_file)

    def __repr__(self) -> str:
        return f"AssetBundle(version={self.version!r}, directory_uri={str(self.directory_uri)!r})"

    def _add_entry(self, entry: ManifestEntry) -> None:
        parent = self.parent_asset_bundle
        url_path = url_path_of(entry.url_path)

        if parent is None or parent.cached_asset_for_url_path(url_path, entry.hash) is None:
            self._add_asset(
                Asset(
                    file_path=entry.file_path,
                    url_path=url_path,
                    file_type=entry.file_type,
                    cacheable=entry.cacheable,
                    hash=entry.hash,
                    source_map_url_path=entry.source_map_url_path,
                    entry_size=entry.size,
                    bundle=self,
                )
            )

        if entry.source_map_file_path is None or entry.source_map_url_path is None:
            return

        # Source maps carry no hash, presence in the parent is enough.
        source_map_url_path = UrlPath(entry.source_map_url_path)
        if parent is None or parent.cached_asset_for_url_path(source_map_url_path) is None:
            self._add_asset(
                Asset(
                    file_path=entry.source_map_file_path,
                    url_path=source_map_url_path,
                    file_type="json",
                    cacheable=True,
                    entry_size=entry.size,
                    bundle=self,
                )
            )

    def _add_asset(self, asset: Asset) -> None:
        self._own_assets_by_url_path[asset.url_path] = asset

    def _load_asset_manifest(self, platform: str) -> AssetManifest:
        manifest_path = self.directory_uri / MANIFEST_FILENAME
        try:
            return AssetManifest.from_file(manifest_path, platform=platform)
        except (OSError, UnicodeDecodeError, ManifestError) as e:
            msg = f"Error loading asset manifest: {e}"
            self.log.error(msg)
            self.log.debug("Manifest load failure for %s", manifest_path, exc_info=True)
            raise ManifestLoadError(msg) from e

    def get_directory_uri(self) -> Path:
        return self.directory_uri

    def get_parent_asset_bundle(self) -> "AssetBundle | None":
        return self.parent_asset_bundle

    def get_version(self) -> str:
        return self.version

    def get_own_assets(self) -> list[Asset]:
        """Return the assets introduced by this bundle."""
        return list(self._own_assets_by_url_path.values())

    def iter_chain(self) -> Iterator["AssetBundle"]:
        """Yield this bundle followed by each of its ancestors."""
        bundle: AssetBundle | None = self
        while bundle is not None:
            yield bundle
            bundle = bundle.parent_asset_bundle

    def cached_asset_for_url_path(self, url_path: str, hash: str | None = None) -> Asset | None:
        """Return an owned asset that can be reused for the given hash.

        A cacheable asset matches when the caller has no hash; any asset
        matches when its hash equals the given one. Parents are not consulted.

        Args:
            url_path: URL path of the asset
            hash: Expected content hash, or None

        Returns:
            The matching asset, or None
        """
        asset = self._own_assets_by_url_path.get(UrlPath(url_path))
        if asset is None:
            return None

        # If the asset is not cacheable, we require a matching hash.
        if (asset.cacheable and hash is None) or (
            asset.hash is not None and asset.hash == hash
        ):
            return asset

        return None

    def asset_for_url_path(self, url_path: str) -> Asset | None:
        """Resolve a URL path through this bundle and its ancestors.

        Returns:
            The asset from the most recent bundle that owns the path, or None
        """
        for bundle in self.iter_chain():
            asset = bundle._own_assets_by_url_path.get(UrlPath(url_path))
            if asset is not None:
                return asset
        return None

    def get_runtime_config(self) -> RuntimeConfig | None:
        """Return the runtime config embedded in the index document.

        Returns None while the config cannot be determined; the extraction
        runs again on the next call until it first succeeds.
        """
        return self._runtime_config.get(
            lambda: load_runtime_config(
                self.directory_uri / self.index_file.file_path, self.log
            )
        )

    def get_app_id(self) -> str | None:
        """Return ``appId`` from the runtime config."""
        return self._app_id.get(lambda: self._runtime_config_value("appId", "APP_ID"))

    def get_root_url_string(self) -> str | None:
        """Return ``ROOT_URL`` from the runtime config."""
        return self._root_url_string.get(
            lambda: self._runtime_config_value("ROOT_URL", "ROOT_URL")
        )

    def _runtime_config_value(self, key: str, label: str) -> str | None:
        runtime_config = self.get_runtime_config()
        if runtime_config is None:
            return None
        if key not in runtime_config:
            self.log.error("Error reading %s from runtime config", label)
            return None
        return runtime_config[key]

    def did_move_to_directory_at_uri(self, directory_uri: Path | str) -> None:
        """Record that the bundle's files now live in another directory."""
        self.log.debug("Bundle %s moved to %s", self.version, directory_uri)
        self.directory_uri = Path(directory_uri)
