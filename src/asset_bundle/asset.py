"""Single file inside an asset bundle."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .core.urls import UrlPath

if TYPE_CHECKING:
    from .bundle import AssetBundle


@dataclass(frozen=True)
class Asset:
    """Immutable description of one file in a bundle.

    Attributes:
        file_path: Path relative to the bundle directory
        url_path: URL path the file is served under, unique within its bundle
        file_type: Semantic category (e.g. 'js', 'css', 'html', 'json')
        cacheable: Whether the asset may be reused without a matching hash
        hash: Content hash, None when the manifest doesn't carry one
        entry_size: Size in bytes, None when unknown
        source_map_url_path: URL path of the associated source map, if any
        bundle: Owning bundle, used only to resolve the on-disk location
    """

    file_path: str
    url_path: UrlPath
    file_type: str
    cacheable: bool
    hash: str | None = None
    source_map_url_path: str | None = None
    entry_size: int | None = None
    bundle: "AssetBundle | None" = field(default=None, compare=False, repr=False)

    def get_file(self) -> Path:
        """Return the absolute location of the file.

        The owning bundle's current directory is used, so the result follows
        the bundle when it is moved. The file itself is not checked.

        Raises:
            ValueError: If the asset is not attached to a bundle
        """
        if self.bundle is None:
            raise ValueError(f"Asset {self.url_path} is not attached to a bundle")
        return Path(self.bundle.directory_uri) / self.file_path
