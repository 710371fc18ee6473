"""
Library catalog API.

Create, look up, search, update and delete books identified by ISBN over
HTTP, backed by SQLite.
"""

__version__ = "1.0.0"
