"""
Version 1 of the API.

This subpackage bundles all endpoints for the first public version of
the Home Services API.  Breaking changes should go into a new version
subpackage (e.g. ``v2``).
"""
