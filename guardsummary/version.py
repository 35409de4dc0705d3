import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version

logger = logging.getLogger(__name__)


def get_version() -> str:
    """
    Get the current version of the guard-summary package.

    Returns the version string from the installed package metadata,
    or 'dev' if the package is not installed (e.g. development environments).
    """
    try:
        return version("guard-summary")
    except PackageNotFoundError:
        logger.debug("guard-summary package metadata not found, returning 'dev'.")
        return "dev"


def get_version_string() -> str:
    """
    Get a formatted version string suitable for CLI output, e.g.
    "guard-summary, version 0.3.0".
    """
    return f"guard-summary, version {get_version()}"
