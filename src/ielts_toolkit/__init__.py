"""Top-level package for the IELTS practice toolkit.

Provides subpackages:
- ielts_toolkit.core – immutable task/attempt models, schema validation, serialization
- ielts_toolkit.scoring – answer matching, per-part aggregation, attempt statistics
- ielts_toolkit.common – shared helpers
"""


def _get_version() -> str:
    """Get version from importlib.metadata (installed) or 0.0.0 when running from a checkout."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("ielts_toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
