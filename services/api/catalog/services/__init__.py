"""Business logic services.

Services contain all business logic and are called by routes.
They receive the CatalogStore explicitly and never touch files directly.
"""
