"""Exception hierarchy for asset bundles."""


class AssetBundleError(RuntimeError):
    """Base class for all asset bundle errors."""


class ManifestError(AssetBundleError):
    """Raised when a program.json document is malformed or incompatible."""


class ManifestLoadError(AssetBundleError):
    """Raised when a bundle cannot load its own manifest.

    The underlying I/O or parse error is available as ``__cause__``.
    A bundle without a manifest is unusable, so this error is fatal
    for the bundle being constructed.
    """


class RuntimeConfigError(AssetBundleError):
    """Raised when the embedded runtime config cannot be decoded."""


class RuntimeConfigNotFound(RuntimeConfigError):
    """Raised when the index document has no runtime config assignment."""
