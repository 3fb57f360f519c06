from importlib.metadata import version as pkg_version, PackageNotFoundError

DET_PKG_NAME = "det"
try:
    __version__ = pkg_version(DET_PKG_NAME)
except PackageNotFoundError:
    # running from a source tree that was not installed
    __version__ = "0.0.0"
