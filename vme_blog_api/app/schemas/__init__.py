"""
Pydantic schema definitions for API payloads.

Schemas describe posts as they are seeded, stored and returned, and
comments as they arrive from the external comments service.
"""
