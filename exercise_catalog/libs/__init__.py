"""
libs - Shared transport utilities for catalog clients.
"""

from .http import HttpClient, encode_segment

__all__ = [
    "HttpClient",
    "encode_segment",
]
