"""XPM image loading, X11 colour names and small string, memory and number helpers."""

__version__ = "0.1.0"