"""
Authenticated HTTP transport built on httpx.
"""

from .transport import Credentials, HTTPTransport, encode_params

__all__ = ["Credentials", "HTTPTransport", "encode_params"]
