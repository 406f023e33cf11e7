"""Stores implementing the workflow persistence port."""

from decision_workflow.storage.base import Store
from decision_workflow.storage.json_file import JsonFileStore, StoreDocument
from decision_workflow.storage.memory import InMemoryStore

__all__ = ["InMemoryStore", "JsonFileStore", "Store", "StoreDocument"]
