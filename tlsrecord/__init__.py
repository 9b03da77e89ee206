"""TLS record-layer headers, byte-sequence search and ANSI console colour helpers."""

__version__ = "0.1.0"
__all__ = ["memmem", "tls_utils"]