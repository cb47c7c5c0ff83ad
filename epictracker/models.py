"""
Data models for the tracker.

Epics and stories live in a single DBState aggregate which is read and
written as one JSON document.
"""

from dataclasses import dataclass, field
from enum import Enum


class Status(Enum):
    """Lifecycle stage of an epic or story. Any status may follow any other."""
    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"

    @property
    def display(self) -> str:
        """Human label used in listings."""
        return _DISPLAY[self]

    @classmethod
    def parse(cls, text: str) -> "Status":
        """Parse a wire value or human label, case-insensitively.

        Accepts "Open", "inprogress", "in progress", "IN_PROGRESS", etc.

        Raises:
            ValueError: if text names no status
        """
        key = text.strip().lower().replace("_", "").replace("-", "").replace(" ", "")
        for status in cls:
            if status.value.lower() == key:
                return status
        valid = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown status '{text}' (expected one of: {valid})")


_DISPLAY = {
    Status.OPEN: "OPEN",
    Status.IN_PROGRESS: "IN PROGRESS",
    Status.RESOLVED: "RESOLVED",
    Status.CLOSED: "CLOSED",
}


@dataclass
class Story:
    """A leaf unit of work.

    Stories carry no id of their own; the id is the key they are stored
    under in DBState.stories.
    """
    name: str
    description: str
    status: Status = Status.OPEN

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Story":
        return cls(
            name=data["name"],
            description=data["description"],
            status=Status(data["status"]),
        )


@dataclass
class Epic:
    """A top-level unit of work.

    `stories` holds the ids of the epic's stories in creation order. The
    Story records themselves live in DBState.stories.
    """
    name: str
    description: str
    status: Status = Status.OPEN
    stories: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "stories": list(self.stories),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Epic":
        return cls(
            name=data["name"],
            description=data["description"],
            status=Status(data["status"]),
            stories=list(data["stories"]),
        )


@dataclass
class DBState:
    """Complete snapshot of all epics, stories and the id counter."""
    last_item_id: int = 0
    epics: dict[int, Epic] = field(default_factory=dict)
    stories: dict[int, Story] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to the persisted layout (ids become string keys)."""
        return {
            "last_item_id": self.last_item_id,
            "epics": {str(k): v.to_dict() for k, v in self.epics.items()},
            "stories": {str(k): v.to_dict() for k, v in self.stories.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DBState":
        """Build from the persisted layout.

        Assumes data has already passed schema validation; string keys are
        converted back to ints.
        """
        return cls(
            last_item_id=data["last_item_id"],
            epics={int(k): Epic.from_dict(v) for k, v in data["epics"].items()},
            stories={int(k): Story.from_dict(v) for k, v in data["stories"].items()},
        )
