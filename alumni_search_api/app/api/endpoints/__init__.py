"""
Endpoint subpackage.

Each module defines an APIRouter for one operation group.  The routers
are aggregated in ``router.py`` at the package level and then included
in the main application.
"""
