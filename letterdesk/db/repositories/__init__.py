"""
Per-record repository modules for database access.

Each module exposes plain functions that take a ``Session`` first and issue
equality-predicate queries against one table.
"""
