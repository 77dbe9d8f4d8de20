"""
Top-level package for the Home Services API.

A local-services marketplace backend: clients post service requests,
providers answer with priced offers, clients accept one and a pending
settlement record is opened.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
