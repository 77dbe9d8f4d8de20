"""
Pydantic schema definitions for API payloads.

Each domain (users, requests, offers, transactions, reviews) defines
its own models for request and response bodies.  Schemas are kept
separate from the SQL tables to decouple API representation from
persistence.
"""
