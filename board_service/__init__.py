"""Package marker for the job board HTTP service."""

__version__ = "1.0.0"
