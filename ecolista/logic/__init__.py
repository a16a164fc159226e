"""Core business logic layer.

Subpackages:
- catalog: category registry
- products: upsert, edit and delete of product rows
- query: derived list views and the debounced search

The controller module ties them to the list state.
"""
__all__ = ["catalog", "products", "query", "controller"]
