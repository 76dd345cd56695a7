"""
Provisioning of the todolist database.

Creates the application user and the empty collections the application
expects. Runs once against a fresh server, through a client that already
holds administrative privileges.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from todolist_init.database.databases import todolist_db
from todolist_init.models.credentials import AppCredentials, RoleGrant
from todolist_init.models.report import BootstrapReport

logger = logging.getLogger(__name__)


def role_documents(grants: list[RoleGrant]) -> list[dict]:
    """Serialize role grants into the form createUser expects."""
    return [grant.model_dump() for grant in grants]


async def user_exists(db: AsyncIOMotorDatabase, username: str) -> bool:
    """Check whether a user is defined on this database."""
    result = await db.command("usersInfo", username)
    return bool(result.get("users"))


async def collection_exists(db: AsyncIOMotorDatabase, name: str) -> bool:
    """Check whether a collection exists in this database."""
    names = await db.list_collection_names(filter={"name": name})
    return name in names


async def create_app_user(db: AsyncIOMotorDatabase, credentials: AppCredentials) -> None:
    """
    Create the application user on this database, with the app user roles
    of todolist.

    Raises:
        pymongo.errors.OperationFailure: If the user already exists or
            the session lacks the privilege to create users
    """
    await db.command(
        "createUser",
        credentials.username,
        pwd=credentials.password,
        roles=role_documents(todolist_db.Roles.APP_USER),
    )
    logger.info(f"Created user '{credentials.username}' on '{db.name}'")


async def create_collection(db: AsyncIOMotorDatabase, name: str) -> None:
    """
    Create an empty collection in this database.

    Raises:
        pymongo.errors.CollectionInvalid: If the collection already exists
    """
    await db.create_collection(name)
    logger.info(f"Created collection '{db.name}.{name}'")


async def bootstrap(
    client: AsyncIOMotorClient,
    credentials: AppCredentials,
    skip_existing: bool = False,
) -> BootstrapReport:
    """
    Provision the todolist database.

    Selects the database, creates the application user with read/write
    access to it, then creates the empty collections. Errors from the
    server are not caught.

    Args:
        client: Client connected with administrative privileges
        credentials: Application user to create
        skip_existing: Check before each step and skip what already exists

    Returns:
        BootstrapReport describing what this run created
    """
    db = client[todolist_db.DB_NAME]
    report = BootstrapReport(db_name=db.name, username=credentials.username)

    if skip_existing and await user_exists(db, credentials.username):
        logger.info(f"User '{credentials.username}' already exists, skipping")
    else:
        await create_app_user(db, credentials)
        report.user_created = True

    for name in todolist_db.Collections.BOOTSTRAP:
        if skip_existing and await collection_exists(db, name):
            logger.info(f"Collection '{name}' already exists, skipping")
            continue
        await create_collection(db, name)
        report.collections_created.append(name)

    return report
