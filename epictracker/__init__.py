"""
epictracker - epics and stories in a single JSON file.

The whole state is loaded, changed by one operation, and written back.
"""

from epictracker.models import DBState, Epic, Status, Story
from epictracker.state import (
    add_epic,
    add_story,
    delete_epic,
    delete_story,
    find_epic_for_story,
    get_epic,
    get_story,
    update_epic_status,
    update_story_status,
)
from epictracker.lib.errors import NotFoundError, ParseError, StorageIOError, TrackerError
from epictracker.lib.storage import Database, JSONFileDatabase, MemoryDatabase
from epictracker.tracker import TrackerDatabase

__all__ = [
    "DBState",
    "Epic",
    "Status",
    "Story",
    "add_epic",
    "add_story",
    "delete_epic",
    "delete_story",
    "find_epic_for_story",
    "get_epic",
    "get_story",
    "update_epic_status",
    "update_story_status",
    "NotFoundError",
    "ParseError",
    "StorageIOError",
    "TrackerError",
    "Database",
    "JSONFileDatabase",
    "MemoryDatabase",
    "TrackerDatabase",
]
