"""
Database module - MongoDB connection, database definitions and provisioning.
"""
from todolist_init.database.connections import (
    get_mongo_client,
    close_connections,
)
from todolist_init.database.databases import todolist_db
from todolist_init.database.provisioning import bootstrap

__all__ = [
    "get_mongo_client",
    "close_connections",
    "todolist_db",
    "bootstrap",
]
