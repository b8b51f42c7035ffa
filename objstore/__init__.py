from objstore.infra.storage import (
    ObjectStore,
    delete_object,
    get_object,
    head_object,
    iter_objects,
    list_objects,
    put_object,
    put_object_with_compression,
)

__all__ = [
    "ObjectStore",
    "delete_object",
    "get_object",
    "head_object",
    "iter_objects",
    "list_objects",
    "put_object",
    "put_object_with_compression",
]
