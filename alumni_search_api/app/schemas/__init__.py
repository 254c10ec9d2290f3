"""
Pydantic schema definitions for API payloads.

Schemas are separated from the services so that the external key
casing (``ID``, ``Name``, ``Total Alumni`` ...) stays out of the
business logic.
"""
