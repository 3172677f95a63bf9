"""Products API.

HTTP CRUD service for products and their options, stored in SQLite.
"""

__version__ = "0.1.0"
