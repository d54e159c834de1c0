"""Peer discovery by UDP broadcast and SHA-256 verified file transfer over TCP."""

__version__ = "0.1.0"