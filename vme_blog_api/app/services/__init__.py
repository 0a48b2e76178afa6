"""
Service layer.

``seed_service`` loads the bundled dataset into an empty store and
``comment_service`` talks to the external comments API.
"""
