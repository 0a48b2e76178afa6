"""
REST API package.

``router.py`` exposes a top‑level ``router`` that includes the
domain‑specific routers from ``endpoints``; ``main`` mounts it under
``/api``.
"""
