"""value types for repositories and projects hosted on a VCS"""

try:
    from importlib.metadata import version

    __version__ = version("vcs-models")
except Exception:
    __version__ = "0.0.0"
