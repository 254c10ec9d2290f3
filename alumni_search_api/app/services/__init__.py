"""
Service layer abstraction.

Each service encapsulates the business logic for one concern
(lookups, statistics, additions) and talks to the JSON store, so API
handlers never touch the backing file directly.
"""
