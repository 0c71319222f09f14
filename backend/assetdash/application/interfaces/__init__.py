from .remote_api import RemoteApi
from .key_value_storage import KeyValueStorage

__all__ = [
    "RemoteApi",
    "KeyValueStorage",
]
