"""
Storage backends for tracker state.

The whole DBState is read and written at once. Callers depend on the
Database interface; JSONFileDatabase is the real store and MemoryDatabase
is a pure in-memory stand-in for tests.
"""

import copy
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from epictracker.lib.errors import ParseError, StorageIOError
from epictracker.lib.validate import validate_before_write, validate_state
from epictracker.models import DBState

logger = logging.getLogger(__name__)


class Database(ABC):
    """Abstract read/write contract over the complete tracker state."""

    @abstractmethod
    def read_db(self) -> DBState:
        """Load the full state.

        Raises:
            ParseError: If stored content is malformed
            StorageIOError: If the store cannot be read
        """
        ...

    @abstractmethod
    def write_db(self, db_state: DBState) -> None:
        """Replace the stored state with db_state.

        Raises:
            StorageIOError: If the store cannot be written
        """
        ...


class JSONFileDatabase(Database):
    """State stored as a single JSON file, rewritten in full on every save.

    An empty file reads as a fresh DBState. A missing file is an error
    unless create_if_missing is set, in which case it also reads as empty.
    """

    def __init__(self, file_path: Path | str, create_if_missing: bool = False):
        self.file_path = Path(file_path)
        self.create_if_missing = create_if_missing

    def read_db(self) -> DBState:
        if not self.file_path.exists() and self.create_if_missing:
            logger.debug(f"No database at {self.file_path}, starting empty")
            return DBState()

        try:
            content = self.file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Database {self.file_path} is not valid UTF-8: {e}") from None
        except OSError as e:
            raise StorageIOError(f"Cannot read database {self.file_path}: {e}") from e

        if not content.strip():
            return DBState()

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON in {self.file_path}: {e}") from None

        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object in {self.file_path}")

        validate_state(data)
        state = DBState.from_dict(data)
        logger.debug(
            f"Loaded {len(state.epics)} epic(s), {len(state.stories)} story(s) "
            f"from {self.file_path}"
        )
        return state

    def write_db(self, db_state: DBState) -> None:
        data = db_state.to_dict()
        validate_before_write(data, self.file_path)

        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise StorageIOError(f"Cannot write database {self.file_path}: {e}") from e
        logger.debug(f"Wrote state (last_item_id={db_state.last_item_id}) to {self.file_path}")


class MemoryDatabase(Database):
    """Keeps the last written state in memory.

    Reads and writes copy the state so callers never share objects with
    the stored record.
    """

    def __init__(self, initial: DBState | None = None):
        self.last_written_state = copy.deepcopy(initial) if initial else DBState()

    def read_db(self) -> DBState:
        return copy.deepcopy(self.last_written_state)

    def write_db(self, db_state: DBState) -> None:
        self.last_written_state = copy.deepcopy(db_state)
