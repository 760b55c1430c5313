from typing import Any, Dict, Optional


class MongoHelperError(Exception):
    """Base class for errors raised by mongo_helpers itself.

    Errors coming from the server or the driver are not wrapped; they reach
    the caller as ``pymongo.errors.PyMongoError`` subclasses.
    """


class ConnectionInitError(MongoHelperError):
    """The client could not be created or did not answer the initial ping."""

    def __init__(self, message: str, con_str: Optional[str] = None):
        super().__init__(message)
        self.con_str = con_str


class InvalidObjectIdError(MongoHelperError, ValueError):
    """The given text is not a 24 character hexadecimal object id."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid ObjectId: {value!r}")
        self.value = value


class DocumentNotFoundError(MongoHelperError, LookupError):

    def __init__(self, db_name: str, collection_name: str, filter: Optional[Dict[str, Any]] = None):
        super().__init__(f"No document in {db_name}.{collection_name} matches {filter!r}")
        self.db_name = db_name
        self.collection_name = collection_name
        self.filter = filter
