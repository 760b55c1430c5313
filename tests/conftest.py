from unittest.mock import MagicMock

import pytest
from bson import ObjectId


class FakeCollection:
    """Just enough of pymongo.Collection for top-level equality filters."""

    def __init__(self):
        self.documents = []

    def _matches(self, document, filter):
        for key, expected in filter.items():
            if isinstance(expected, dict) and "$eq" in expected:
                expected = expected["$eq"]
            if document.get(key) != expected:
                return False
        return True

    def insert_one(self, data):
        data.setdefault("_id", ObjectId())
        self.documents.append(dict(data))
        return MagicMock(inserted_id=data["_id"])

    def find_one(self, filter):
        for document in self.documents:
            if self._matches(document, filter):
                return dict(document)
        return None

    def update_one(self, filter, update):
        for document in self.documents:
            if self._matches(document, filter):
                document.update(update["$set"])
                return MagicMock(matched_count=1, modified_count=1)
        return MagicMock(matched_count=0, modified_count=0)

    def delete_one(self, filter):
        for i, document in enumerate(self.documents):
            if self._matches(document, filter):
                del self.documents[i]
                return MagicMock(deleted_count=1)
        return MagicMock(deleted_count=0)


def make_client(collection):
    client = MagicMock()
    client.__getitem__.return_value.__getitem__.return_value = collection
    return client


def make_cursor(documents):
    cursor = MagicMock()
    cursor.__iter__.return_value = iter(documents)
    return cursor


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def client(collection):
    return make_client(collection)


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def fake_client(fake_collection):
    return make_client(fake_collection)
