"""Response models, server message decoding and wire encodings for the obs-websocket protocol."""

__version__ = "0.14.0"