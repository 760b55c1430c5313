from .core.utils import bare_obj_id, parse_object_id
from .logs.logger import setup_logger
from .storage.errors import (
    ConnectionInitError,
    DocumentNotFoundError,
    InvalidObjectIdError,
    MongoHelperError,
)
from .storage.mongo_context import MongoDbContext
from .storage.operations import (
    Document,
    Documents,
    close_mg,
    count_rows,
    delete_one,
    delete_one_by_id,
    find,
    find_one,
    find_one_by_id,
    get_field_value,
    get_field_value_by_id,
    init_mg,
    insert_one,
    is_exist,
    update_one,
    update_one_by_id,
    upsert_one,
)
from .storage.repository import Repository

__version__ = "0.1.0"
