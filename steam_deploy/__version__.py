"""Version information for steam-deploy package"""

__version__ = "1.0.0"
__version_info__ = tuple(int(part) for part in __version__.split("."))
__author__ = "steam-deploy contributors"
__license__ = "MIT"


def get_version():
    """Get the version string"""
    return __version__
