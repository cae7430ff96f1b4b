"""Core business logic layer.

Subpackages:
- grocery: aggregating planned meals into a grocery list, checklist formatting
"""
__all__ = ["grocery"]
