"""Client for sending image-editing commands to a local image server over TCP."""

__version__ = "0.1.0"
__all__ = ["cli", "client", "commands"]