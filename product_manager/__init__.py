"""Product catalog manager with a JSON API and server-rendered views."""

__version__ = "0.1.0"
