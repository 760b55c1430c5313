"""
asyncio counterparts of ``operations`` over a motor ``AsyncIOMotorClient``.

Same arguments, same return values, same errors; only the driver calls are
awaited.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from ..config.settings import CONNECT_TIMEOUT_SECONDS, COUNT_MAX_TIME_SECONDS
from ..core.utils import parse_object_id
from .errors import ConnectionInitError, DocumentNotFoundError
from .operations import (
    Document,
    Documents,
    SortSpec,
    _field_text,
    _field_value_query,
    _sort_list,
    _upsert_document,
)

logger = logging.getLogger(__name__)


async def init_mg_async(con_str: str, timeout: float = CONNECT_TIMEOUT_SECONDS) -> AsyncIOMotorClient:
    timeout_ms = int(timeout * 1000)
    client = None
    # bad ports in the URI come back from the parser as plain ValueError
    try:
        client = AsyncIOMotorClient(
            con_str,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
        await client.admin.command("ping")
    except (PyMongoError, ValueError) as e:
        logger.error(f"MongoDB connection failed: {type(e).__name__}: {e}", exc_info=True)
        if client is not None:
            client.close()
        raise ConnectionInitError(str(e), con_str) from e

    logger.info("MongoDB connection established (motor).")
    return client


def _collection(db_name: str, coll_name: str, client: AsyncIOMotorClient):
    return client[db_name][coll_name]


async def insert_one(db_name: str, coll_name: str, client: AsyncIOMotorClient, data: Document) -> bool:
    await _collection(db_name, coll_name, client).insert_one(data)
    return True


async def update_one(db_name: str, coll_name: str, client: AsyncIOMotorClient, data: Document, filter: Document) -> bool:
    result = await _collection(db_name, coll_name, client).update_one(filter, {"$set": data})
    if not result.matched_count:
        logger.debug(f"update_one on {db_name}.{coll_name} matched no document: {filter}")
    return True


async def upsert_one(db_name: str, coll_name: str, client: AsyncIOMotorClient, data: Document, filter: Document) -> bool:
    await _collection(db_name, coll_name, client).update_one(filter, _upsert_document(data), upsert=True)
    return True


async def update_one_by_id(db_name: str, coll_name: str, client: AsyncIOMotorClient, data: Document, obj_id: str) -> bool:
    object_id = parse_object_id(obj_id)
    return await update_one(db_name, coll_name, client, data, {"_id": {"$eq": object_id}})


async def delete_one(db_name: str, coll_name: str, client: AsyncIOMotorClient, filter: Document) -> bool:
    result = await _collection(db_name, coll_name, client).delete_one(filter)
    if not result.deleted_count:
        logger.debug(f"delete_one on {db_name}.{coll_name} matched no document: {filter}")
    return True


async def delete_one_by_id(db_name: str, coll_name: str, client: AsyncIOMotorClient, obj_id: str) -> bool:
    object_id = parse_object_id(obj_id)
    return await delete_one(db_name, coll_name, client, {"_id": object_id})


async def find_one(db_name: str, coll_name: str, client: AsyncIOMotorClient, filter: Document) -> Document:
    document = await _collection(db_name, coll_name, client).find_one(filter)
    if document is None:
        raise DocumentNotFoundError(db_name, coll_name, filter)
    return document


async def find_one_by_id(db_name: str, coll_name: str, client: AsyncIOMotorClient, obj_id: str) -> Document:
    object_id = parse_object_id(obj_id)
    return await find_one(db_name, coll_name, client, {"_id": object_id})


async def find(
    db_name: str,
    coll_name: str,
    client: AsyncIOMotorClient,
    filter: Optional[Document] = None,
    sort_order: SortSpec = None,
    limit: int = 0,
) -> Documents:
    options = {}
    sort = _sort_list(sort_order)
    if sort:
        options["sort"] = sort
    if limit > 0:
        options["limit"] = limit

    cursor = _collection(db_name, coll_name, client).find(filter or {}, **options)
    return await cursor.to_list(length=None)


async def is_exist(db_name: str, coll_name: str, client: AsyncIOMotorClient, filter: Document) -> bool:
    try:
        await find_one(db_name, coll_name, client, filter)
    except DocumentNotFoundError:
        return False
    except PyMongoError:
        logger.warning(f"is_exist lookup on {db_name}.{coll_name} failed:", exc_info=True)
        return False
    return True


async def count_rows(
    db_name: str,
    coll_name: str,
    client: AsyncIOMotorClient,
    filter: Optional[Document] = None,
    max_time: float = COUNT_MAX_TIME_SECONDS,
) -> int:
    collection = _collection(db_name, coll_name, client)
    return await collection.count_documents(filter or {}, maxTimeMS=int(max_time * 1000))


async def get_field_value(db_name: str, coll_name: str, client: AsyncIOMotorClient, filter: Document, field_name: str) -> str:
    projection, options = _field_value_query(filter, field_name)
    cursor = _collection(db_name, coll_name, client).find(filter, projection, **options)
    documents = await cursor.to_list(length=1)
    if not documents:
        return ""
    return _field_text(documents[0], field_name)


async def get_field_value_by_id(db_name: str, coll_name: str, client: AsyncIOMotorClient, obj_id: str, field_name: str) -> str:
    object_id = parse_object_id(obj_id)
    return await get_field_value(db_name, coll_name, client, {"_id": object_id}, field_name)
