"""
Core infrastructure: settings, logging, error handling, middleware and
the in-memory user store.
"""
