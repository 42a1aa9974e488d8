"""
Order Service Package.

FastAPI service that validates and stores commerce orders and products.
"""

__version__ = "1.0.0"
