"""
Application layer for the catalog bounded context.

Use cases coordinate domain entities and the BookStore port to fulfill
catalog operations. No framework or infrastructure imports allowed.
"""
