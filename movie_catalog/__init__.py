"""
Movie Catalog Service package.

This package contains the catalog business rules, the genre/state codec,
database models and storage adapters, the REST API and shared utilities.
"""

__version__ = "1.0.0"
