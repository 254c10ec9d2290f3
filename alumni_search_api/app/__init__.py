"""
Application package initializer.

The code is split into configuration and persistence (``core``),
wire schemas (``schemas``), business logic (``services``) and HTTP
routing (``api``).
"""

from .main import app  # noqa: F401
