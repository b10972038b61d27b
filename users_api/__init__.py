"""
Top-level package for the Users API.

The service itself lives in ``users_api.app``; ``users_api.client``
provides a ``requests``-based client for it.  Neither is imported
here, so that using the client does not build the FastAPI app.
"""

__all__ = []
