"""Fill recruiting-platform application forms from a JSON-Resume CV."""

__version__ = "0.1.0"
