"""
Service layer abstraction.

Each service encapsulates the query logic for a domain.  Services
operate on caller‑supplied collections and never touch storage, so
they can be reused unchanged whichever way the records were loaded.
"""
