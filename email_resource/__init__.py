"""Email Resource - CI pipeline step that sends build notifications by email."""

__version__ = "1.0.0"
