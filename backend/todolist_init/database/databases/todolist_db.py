"""
Todolist database configuration.
Stores the todo items of the application.
"""
from todolist_init.models.credentials import RoleGrant

DB_NAME = "todolist"


class Collections:
    """Collection names in todolist."""
    TODOS = "todos"

    # Created empty at bootstrap, in this order
    BOOTSTRAP = [TODOS]


class Roles:
    """Role grants for users of todolist."""
    READ_WRITE = "readWrite"

    # The application user gets read/write on this database only
    APP_USER = [RoleGrant(role=READ_WRITE, db=DB_NAME)]


# Manifest, logged in the startup banner
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Todo items of the todolist application",
    "collections": Collections.BOOTSTRAP,
    "app_user_roles": [grant.model_dump() for grant in Roles.APP_USER],
}
