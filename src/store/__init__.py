"""Plugin data storage layer.

This package maps holders and data objects onto files and moves
encoded payloads between those files and in-memory objects.
"""
