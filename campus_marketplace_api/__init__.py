"""
Top‑level package for the Campus Marketplace API.

This file makes ``campus_marketplace_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``campus_marketplace_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
