"""
Core infrastructure: settings, logging, the SQLite layer and security.
"""
