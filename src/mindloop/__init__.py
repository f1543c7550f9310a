"""Top-level package for the MindLoop curriculum toolkit.

Provides subpackages:
- mindloop.extractor – text extraction with decoder seam and synthetic fallback
- mindloop.analysis – content profiling (key terms, difficulty, readability)
- mindloop.builder – curriculum levels and question synthesis
- mindloop.storage – JSON snapshot of processed documents
- mindloop.engine – pipeline orchestrator with readiness lifecycle
"""

def _get_version() -> str:
    """Get version from installed package metadata."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("mindloop")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
