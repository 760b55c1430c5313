from typing import Optional

from pymongo import MongoClient

from ..config.settings import MONGO_DB_NAME, MONGO_URI
from . import operations as ops
from .operations import Document, Documents, SortSpec


class MongoDbContext:
    """A shared client bound to one database.

    The client is injected; the context neither creates nor owns it unless
    built through ``from_settings``, and ``close`` only closes a client it owns.
    """

    def __init__(self, client: MongoClient, db_name: str, owns_client: bool = False):
        self.client = client
        self.db_name = db_name
        self.owns_client = owns_client

    @classmethod
    def from_settings(cls, url: str = MONGO_URI, db_name: Optional[str] = MONGO_DB_NAME) -> "MongoDbContext":
        if not db_name:
            raise ValueError("MONGO_DB_NAME is not set")
        return cls(ops.init_mg(url), db_name, owns_client=True)

    def close(self):
        if self.owns_client:
            ops.close_mg(self.client)

    def insert(self, collection_name: str, data: Document) -> bool:
        return ops.insert_one(self.db_name, collection_name, self.client, data)

    def update(self, collection_name: str, filter_query: Document, data: Document) -> bool:
        return ops.update_one(self.db_name, collection_name, self.client, data, filter_query)

    def update_by_id(self, collection_name: str, obj_id: str, data: Document) -> bool:
        return ops.update_one_by_id(self.db_name, collection_name, self.client, data, obj_id)

    def upsert(self, collection_name: str, filter_query: Document, data: Document) -> bool:
        return ops.upsert_one(self.db_name, collection_name, self.client, data, filter_query)

    def delete(self, collection_name: str, filter_query: Document) -> bool:
        return ops.delete_one(self.db_name, collection_name, self.client, filter_query)

    def delete_by_id(self, collection_name: str, obj_id: str) -> bool:
        return ops.delete_one_by_id(self.db_name, collection_name, self.client, obj_id)

    def get(self, collection_name: str, query: Optional[Document] = None, sort_order: SortSpec = None, limit: int = 0) -> Documents:
        return ops.find(self.db_name, collection_name, self.client, query, sort_order, limit)

    def get_one(self, collection_name: str, query: Document) -> Document:
        return ops.find_one(self.db_name, collection_name, self.client, query)

    def get_by_id(self, collection_name: str, obj_id: str) -> Document:
        return ops.find_one_by_id(self.db_name, collection_name, self.client, obj_id)

    def exists(self, collection_name: str, query: Document) -> bool:
        return ops.is_exist(self.db_name, collection_name, self.client, query)

    def count(self, collection_name: str, query: Optional[Document] = None) -> int:
        return ops.count_rows(self.db_name, collection_name, self.client, query)

    def field_value(self, collection_name: str, query: Document, field_name: str) -> str:
        return ops.get_field_value(self.db_name, collection_name, self.client, query, field_name)

    def field_value_by_id(self, collection_name: str, obj_id: str, field_name: str) -> str:
        return ops.get_field_value_by_id(self.db_name, collection_name, self.client, obj_id, field_name)
