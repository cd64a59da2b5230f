"""Unix time as colored hexadecimal bytes."""

__version__ = "0.1.0"
