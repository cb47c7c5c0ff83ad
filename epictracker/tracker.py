"""
Command-level access to the tracker.

Each method is one load-mutate-save cycle: read the full state, apply a
single operation, write it back. A failed operation raises before the
write, so the store is left as it was.
"""

import logging

from epictracker import state as ops
from epictracker.lib.storage import Database
from epictracker.models import DBState, Epic, Status, Story

logger = logging.getLogger(__name__)


class TrackerDatabase:
    """Runs tracker commands against any Database backend."""

    def __init__(self, database: Database):
        self.database = database

    def read_db(self) -> DBState:
        return self.database.read_db()

    def _apply(self, operation, *args):
        db_state = self.database.read_db()
        logger.debug(f"Applying {operation.__name__}{args}")
        result = operation(db_state, *args)
        self.database.write_db(db_state)
        return result

    def create_epic(self, epic: Epic) -> int:
        return self._apply(ops.add_epic, epic)

    def create_story(self, story: Story, epic_id: int) -> int:
        return self._apply(ops.add_story, story, epic_id)

    def update_epic_status(self, epic_id: int, status: Status) -> None:
        self._apply(ops.update_epic_status, epic_id, status)

    def update_story_status(self, story_id: int, status: Status) -> None:
        self._apply(ops.update_story_status, story_id, status)

    def delete_epic(self, epic_id: int) -> None:
        self._apply(ops.delete_epic, epic_id)

    def delete_story(self, epic_id: int, story_id: int) -> None:
        self._apply(ops.delete_story, epic_id, story_id)

    def get_epic(self, epic_id: int) -> Epic:
        return ops.get_epic(self.database.read_db(), epic_id)

    def get_story(self, story_id: int) -> Story:
        return ops.get_story(self.database.read_db(), story_id)
