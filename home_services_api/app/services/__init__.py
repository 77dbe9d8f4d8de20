"""
Service layer abstraction.

Each service encapsulates the business logic of one domain (users,
requests, offers, transactions, reviews, statistics) on top of the
SQLite tables defined in ``core.db``.  Services raise built-in
exceptions carrying a short error code; the API layer maps them to
HTTP responses.
"""
