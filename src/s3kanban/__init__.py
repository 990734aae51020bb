"""s3kanban - Single-board task tracker persisted in an S3 bucket."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the package version."""
    return __version__
