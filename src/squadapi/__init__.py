"""In-memory REST service for football player records."""

__version__ = "0.1.0"
