"""
Catalog business rules: codec, errors, catalog service and suggestions.
"""
