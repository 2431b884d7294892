"""ContentDesk - content workflow core for the content-operations dashboard."""

__version__ = "0.1.0"
