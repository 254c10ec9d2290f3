"""
API package.

``router.py`` aggregates the endpoint routers; ``cors.py``,
``deps.py`` and ``responses.py`` hold the pieces every endpoint
shares.
"""
