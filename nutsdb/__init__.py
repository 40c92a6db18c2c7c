"""Building blocks of an embedded key/value store: data structures, entry encoding, file-handle cache and errors."""

__version__ = "0.1.0"