from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("lms-records")
except PackageNotFoundError:
    __version__ = "dev"
