"""
Version utility functions.
"""

from kmlview import __version__


def get_version() -> str:
    """
    Get the current version of the KML Viewer.

    Returns:
        str: The version string.
    """
    return __version__


def format_version_info() -> dict[str, str]:
    """
    Get formatted version information.

    Returns:
        dict[str, str]: Dictionary containing version information.
    """
    return {
        "name": "KML Viewer API",
        "version": get_version(),
        "description": "Upload KML files and inspect their geometries",
    }
