"""
Service layer abstraction.

Services encapsulate business logic on top of the in-memory store so
that API handlers never touch the store directly.
"""
