import re

from bson import ObjectId
from bson.errors import InvalidId

from ..storage.errors import InvalidObjectIdError

HEX_OBJECT_ID = re.compile(r"[0-9a-fA-F]{24}")


def bare_obj_id(object_id):
    """ObjectID("5f1...") / ObjectId('5f1...') -> 5f1... (no validation)."""
    text = re.sub(r"ObjectI[Dd]\(", "", str(object_id))
    text = text.replace(")", "")
    return text.strip("'\"")


def parse_object_id(object_id) -> ObjectId:
    if isinstance(object_id, ObjectId):
        return object_id
    if not isinstance(object_id, str) or not HEX_OBJECT_ID.fullmatch(object_id):
        raise InvalidObjectIdError(object_id)
    try:
        return ObjectId(object_id)
    except InvalidId as e:
        raise InvalidObjectIdError(object_id) from e
