"""
Top-level package for the Alumni Search Engine API.

All functionality lives in the ``app`` subpackage; import the ASGI
application as ``alumni_search_api.app.main:app``.
"""

__all__ = []
