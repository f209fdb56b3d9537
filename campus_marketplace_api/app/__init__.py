"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (users, messages) has a service in
``services``, persistence helpers in ``repositories`` and a router
defined in ``api/endpoints``.
"""

from .main import app  # noqa: F401
