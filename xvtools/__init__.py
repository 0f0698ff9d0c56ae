"""Unix-style user tools, a shell parser, an allocator and binary layout helpers."""

__version__ = "0.1.0"