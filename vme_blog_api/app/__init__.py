"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, database, exceptions),
``repositories`` (post storage adapters), ``services`` (seeding and
the external comments client), ``api`` (REST routes) and ``graphql``
(the GraphQL schema and its resolvers).
"""

from .main import app  # noqa: F401
