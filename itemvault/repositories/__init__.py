"""
Repository layer for data access.

Repositories own keyed collections of domain entities and signal
violations with the exceptions in itemvault.errors.
"""
