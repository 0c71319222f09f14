from .key_value_entry import KeyValueEntryModel

__all__ = ["KeyValueEntryModel"]
