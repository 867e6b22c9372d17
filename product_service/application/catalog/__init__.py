"""
Application layer for the catalog bounded context.

Use cases coordinate the Product entity and the repository port
to fulfill CRUD operations. No framework or infrastructure imports allowed.
"""
