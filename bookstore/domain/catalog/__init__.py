"""
Catalog bounded context — domain layer.

This module contains all domain logic for the book catalog:
- Books identified by asin, with an open attribute bag
- Comments nested under a book
- Validation and shallow-merge rules
"""
