"""in-memory profile manager with a terminal session front end."""
__version__ = "0.1.0"
