"""
Schema validation for persisted tracker state.

Every read and every write passes through here. Content that does not match
the schema, or whose ids are inconsistent, is rejected rather than repaired.
"""

import json
from pathlib import Path

import jsonschema

from epictracker.lib.errors import ParseError

STATE_SCHEMA = "db_state"

# Cache loaded schemas
_schema_cache: dict[str, dict] = {}


def _get_schemas_dir() -> Path:
    """Get path to schemas directory."""
    return Path(__file__).parent.parent / "schemas"


def _load_schema(schema_name: str) -> dict:
    """Load schema by name, with caching."""
    if schema_name not in _schema_cache:
        schema_path = _get_schemas_dir() / f"{schema_name}.schema.json"
        _schema_cache[schema_name] = json.loads(schema_path.read_text())
    return _schema_cache[schema_name]


def validate(data: dict, schema_name: str = STATE_SCHEMA) -> None:
    """
    Validate data against named schema.

    Raises:
        ParseError: If validation fails, with the JSON path of the bad field
    """
    schema = _load_schema(schema_name)

    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        path = ".".join(str(p) for p in e.absolute_path) if e.absolute_path else "(root)"
        raise ParseError(f"[{schema_name}] {e.message}", path) from None


def check_references(data: dict) -> None:
    """
    Check the id invariants that JSON Schema cannot express.

    - ids are whole numbers, not floats like 1.0
    - epic and story ids never collide
    - no id exceeds last_item_id
    - every story listed by an epic exists
    - no story is listed by more than one epic

    Raises:
        ParseError: on the first violation found
    """
    last_id = data["last_item_id"]
    if type(last_id) is not int:
        raise ParseError(f"last_item_id must be an integer, got {last_id!r}", "last_item_id")
    epic_ids = {int(k) for k in data["epics"]}
    story_ids = {int(k) for k in data["stories"]}

    shared = epic_ids & story_ids
    if shared:
        raise ParseError(f"id {min(shared)} used by both an epic and a story")

    issued = epic_ids | story_ids
    if issued and max(issued) > last_id:
        raise ParseError(f"id {max(issued)} exceeds last_item_id {last_id}")

    owners = {}
    for key, epic in data["epics"].items():
        for story_id in epic["stories"]:
            if type(story_id) is not int:
                raise ParseError(f"story id must be an integer, got {story_id!r}", f"epics.{key}.stories")
            if story_id not in story_ids:
                raise ParseError(f"epic {key} lists unknown story {story_id}", f"epics.{key}.stories")
            owner = owners.setdefault(story_id, key)
            if owner != key:
                raise ParseError(f"story {story_id} listed by both epic {owner} and epic {key}", f"epics.{key}.stories")


def validate_state(data: dict) -> None:
    """Run schema and reference checks on a serialized state."""
    validate(data, STATE_SCHEMA)
    check_references(data)


def validate_before_write(data: dict, filepath: Path) -> None:
    """
    Validate a serialized state before writing it. Ensures we never write invalid data.

    Raises:
        ParseError: If data is not a valid state
    """
    try:
        validate_state(data)
    except ParseError as e:
        raise ParseError(f"Refusing to write invalid state to {filepath}: {e}") from None
