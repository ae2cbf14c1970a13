"""
Adapters — Thin wrappers around the portal's HTTP endpoints.

Own the session cookies and the redirect chasing, return typed models.
Decoding is delegated to extractors/.
"""

from .weblink import WebLinkClient

__all__ = ["WebLinkClient"]
