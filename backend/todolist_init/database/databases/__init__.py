"""
Database definitions and collection constants.
"""
from todolist_init.database.databases import todolist_db

__all__ = ["todolist_db"]
