from typing import Any, Dict, List, Optional

from .mongo_context import MongoDbContext
from .operations import SortSpec


class Repository:

    def __init__(self, collection_name: str, context: MongoDbContext):
        self.collection = collection_name
        self.ctx = context

    def get(self, query: Optional[Dict[str, Any]] = None, limit: int = 0, sort_order: SortSpec = None) -> List[Dict[str, Any]]:
        return self.ctx.get(self.collection, query, sort_order, limit)

    def get_one(self, query: Dict[str, Any]) -> Dict[str, Any]:
        return self.ctx.get_one(self.collection, query)

    def get_by_id(self, obj_id: str) -> Dict[str, Any]:
        return self.ctx.get_by_id(self.collection, obj_id)

    def save(self, data: Dict[str, Any]) -> bool:
        return self.ctx.insert(self.collection, data)

    def update(self, filter_query: Dict[str, Any], data: Dict[str, Any]) -> bool:
        return self.ctx.update(self.collection, filter_query, data)

    def update_by_id(self, obj_id: str, data: Dict[str, Any]) -> bool:
        return self.ctx.update_by_id(self.collection, obj_id, data)

    def delete(self, filter_query: Dict[str, Any]) -> bool:
        return self.ctx.delete(self.collection, filter_query)

    def delete_by_id(self, obj_id: str) -> bool:
        return self.ctx.delete_by_id(self.collection, obj_id)

    def exists(self, query: Dict[str, Any]) -> bool:
        return self.ctx.exists(self.collection, query)

    def count(self, query: Optional[Dict[str, Any]] = None) -> int:
        return self.ctx.count(self.collection, query)

    def field_value(self, query: Dict[str, Any], field_name: str) -> str:
        return self.ctx.field_value(self.collection, query, field_name)

    def field_value_by_id(self, obj_id: str, field_name: str) -> str:
        return self.ctx.field_value_by_id(self.collection, obj_id, field_name)

    def upsert(self, filter_query: Dict[str, Any], update_data: Dict[str, Any]) -> bool:
        return self.ctx.upsert(self.collection, filter_query, update_data)
