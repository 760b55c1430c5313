"""
Synchronous CRUD helpers over a shared ``pymongo.MongoClient``.

Every helper takes the database name, the collection name and the client
explicitly, issues exactly one driver call and hands driver errors back to
the caller untouched. The client is created once with ``init_mg`` and shared
by all callers; helpers never open or close connections themselves.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from ..config.settings import CONNECT_TIMEOUT_SECONDS, COUNT_MAX_TIME_SECONDS
from ..core.utils import parse_object_id
from .errors import ConnectionInitError, DocumentNotFoundError

logger = logging.getLogger(__name__)

Document = Dict[str, Any]
Documents = List[Document]
SortSpec = Union[Mapping[str, Any], Sequence[Tuple[str, Any]], None]


def init_mg(con_str: str, timeout: float = CONNECT_TIMEOUT_SECONDS) -> MongoClient:
    """Create the process-wide client and make sure the server answers.

    Raises ConnectionInitError (driver error chained) when the URI is
    malformed, the server is unreachable, authentication fails or the
    ping does not complete within ``timeout`` seconds.
    """
    timeout_ms = int(timeout * 1000)
    client = None
    # bad ports in the URI come back from the parser as plain ValueError
    try:
        client = MongoClient(
            con_str,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
        client.admin.command("ping")
    except (PyMongoError, ValueError) as e:
        logger.error(f"MongoDB connection failed: {type(e).__name__}: {e}", exc_info=True)
        if client is not None:
            client.close()
        raise ConnectionInitError(str(e), con_str) from e

    logger.info("MongoDB connection established.")
    return client


def close_mg(client: MongoClient) -> None:
    client.close()
    logger.info("MongoDB connection closed.")


def _collection(db_name: str, coll_name: str, client: MongoClient):
    return client[db_name][coll_name]


def _sort_list(sort_order: SortSpec) -> Optional[List[Tuple[str, Any]]]:
    if not sort_order:
        return None
    if isinstance(sort_order, str):
        return [(sort_order, 1)]
    if isinstance(sort_order, Mapping):
        return list(sort_order.items())
    return [tuple(pair) for pair in sort_order]


def _field_text(document: Document, field_name: str) -> str:
    # plain str(): True -> "True", 31.0 -> "31.0"
    value: Any = document
    for part in field_name.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return ""
        value = value[part]
    return "" if value is None else str(value)


def insert_one(db_name: str, coll_name: str, client: MongoClient, data: Document) -> bool:
    _collection(db_name, coll_name, client).insert_one(data)
    return True


def update_one(db_name: str, coll_name: str, client: MongoClient, data: Document, filter: Document) -> bool:
    result = _collection(db_name, coll_name, client).update_one(filter, {"$set": data})
    # zero matches is still reported as success
    if not result.matched_count:
        logger.debug(f"update_one on {db_name}.{coll_name} matched no document: {filter}")
    return True


def _upsert_document(data: Document) -> Document:
    if "_id" in data:
        data = data.copy()
        data.pop("_id")
    if any(key.startswith("$") for key in data.keys()):
        return data
    return {"$set": data}


def upsert_one(db_name: str, coll_name: str, client: MongoClient, data: Document, filter: Document) -> bool:
    """Update the first match or insert one built from ``filter`` and ``data``.

    ``_id`` is never written from ``data``. Plain fields go through ``$set``;
    a document of update operators is sent unchanged.
    """
    _collection(db_name, coll_name, client).update_one(filter, _upsert_document(data), upsert=True)
    return True


def update_one_by_id(db_name: str, coll_name: str, client: MongoClient, data: Document, obj_id: str) -> bool:
    object_id = parse_object_id(obj_id)
    return update_one(db_name, coll_name, client, data, {"_id": {"$eq": object_id}})


def delete_one(db_name: str, coll_name: str, client: MongoClient, filter: Document) -> bool:
    result = _collection(db_name, coll_name, client).delete_one(filter)
    if not result.deleted_count:
        logger.debug(f"delete_one on {db_name}.{coll_name} matched no document: {filter}")
    return True


def delete_one_by_id(db_name: str, coll_name: str, client: MongoClient, obj_id: str) -> bool:
    object_id = parse_object_id(obj_id)
    return delete_one(db_name, coll_name, client, {"_id": object_id})


def find_one(db_name: str, coll_name: str, client: MongoClient, filter: Document) -> Document:
    document = _collection(db_name, coll_name, client).find_one(filter)
    if document is None:
        raise DocumentNotFoundError(db_name, coll_name, filter)
    return document


def find_one_by_id(db_name: str, coll_name: str, client: MongoClient, obj_id: str) -> Document:
    object_id = parse_object_id(obj_id)
    return find_one(db_name, coll_name, client, {"_id": object_id})


def find(
    db_name: str,
    coll_name: str,
    client: MongoClient,
    filter: Optional[Document] = None,
    sort_order: SortSpec = None,
    limit: int = 0,
) -> Documents:
    """Return every matching document, sorted by ``sort_order``.

    ``limit <= 0`` means no limit. An empty result is an empty list.
    """
    options = {}
    sort = _sort_list(sort_order)
    if sort:
        options["sort"] = sort
    if limit > 0:
        options["limit"] = limit

    cursor = _collection(db_name, coll_name, client).find(filter or {}, **options)
    try:
        return list(cursor)
    finally:
        cursor.close()


def is_exist(db_name: str, coll_name: str, client: MongoClient, filter: Document) -> bool:
    # store errors and "not found" both come back as False
    try:
        find_one(db_name, coll_name, client, filter)
    except DocumentNotFoundError:
        return False
    except PyMongoError:
        logger.warning(f"is_exist lookup on {db_name}.{coll_name} failed:", exc_info=True)
        return False
    return True


def count_rows(
    db_name: str,
    coll_name: str,
    client: MongoClient,
    filter: Optional[Document] = None,
    max_time: float = COUNT_MAX_TIME_SECONDS,
) -> int:
    collection = _collection(db_name, coll_name, client)
    return collection.count_documents(filter or {}, maxTimeMS=int(max_time * 1000))


def _field_value_query(filter: Document, field_name: str):
    projection: Dict[str, Any] = {field_name: 1}
    options: Dict[str, Any] = {"limit": 1}
    if "$text" in filter:
        projection["score"] = {"$meta": "textScore"}
        options["sort"] = [("score", {"$meta": "textScore"})]
    return projection, options


def get_field_value(db_name: str, coll_name: str, client: MongoClient, filter: Document, field_name: str) -> str:
    """Text form of ``field_name`` on the best match, or "" when nothing matches.

    Dotted names (``address.city``) are followed into sub-documents. When the
    filter holds a ``$text`` clause the best match is the highest text score.
    """
    projection, options = _field_value_query(filter, field_name)
    cursor = _collection(db_name, coll_name, client).find(filter, projection, **options)
    try:
        for document in cursor:
            return _field_text(document, field_name)
    finally:
        cursor.close()
    return ""


def get_field_value_by_id(db_name: str, coll_name: str, client: MongoClient, obj_id: str, field_name: str) -> str:
    object_id = parse_object_id(obj_id)
    return get_field_value(db_name, coll_name, client, {"_id": object_id}, field_name)
