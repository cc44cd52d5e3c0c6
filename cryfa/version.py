"""Version resolution for package metadata and the envelope watermark."""

try:
    from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
    from importlib.metadata import version as _package_version
except Exception:  # pragma: no cover
    _PackageNotFoundError = Exception
    _package_version = None


# Format version written into the watermark: "#cryfa v<VERSION>.<RELEASE>"
VERSION = 1
RELEASE = 1

_format_version = f"{VERSION}.{RELEASE}"
if _package_version is not None:
    try:
        __version__ = _package_version("cryfa")
    except _PackageNotFoundError:
        __version__ = _format_version
else:
    __version__ = _format_version


__all__ = ["RELEASE", "VERSION", "__version__"]
