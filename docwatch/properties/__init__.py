from docwatch.properties.base import BasePropertyStore, PropertyKeys
from docwatch.properties.json_store import JsonFilePropertyStore
from docwatch.properties.memory_store import InMemoryPropertyStore

__all__ = [
    "BasePropertyStore",
    "InMemoryPropertyStore",
    "JsonFilePropertyStore",
    "PropertyKeys",
]
