"""
Mutation operations on DBState.

Every operation checks its preconditions before touching the state, so a
raised NotFoundError always means nothing changed. Epic and story ids come
from the same counter (DBState.last_item_id) and are never reused.
"""

import logging

from epictracker.lib.errors import NotFoundError
from epictracker.models import DBState, Epic, Status, Story

logger = logging.getLogger(__name__)


def _next_id(state: DBState) -> int:
    """Advance the shared counter and return the new id."""
    state.last_item_id += 1
    return state.last_item_id


def get_epic(state: DBState, epic_id: int) -> Epic:
    """Look up an epic by id.

    Raises:
        NotFoundError: if no epic has this id
    """
    epic = state.epics.get(epic_id)
    if epic is None:
        raise NotFoundError(epic_id, "epic")
    return epic


def get_story(state: DBState, story_id: int) -> Story:
    """Look up a story by id.

    Raises:
        NotFoundError: if no story has this id
    """
    story = state.stories.get(story_id)
    if story is None:
        raise NotFoundError(story_id, "story")
    return story


def find_epic_for_story(state: DBState, story_id: int) -> int | None:
    """Return the id of the epic listing story_id, or None."""
    for epic_id, epic in state.epics.items():
        if story_id in epic.stories:
            return epic_id
    return None


def add_epic(state: DBState, epic: Epic) -> int:
    """Insert an epic under a freshly allocated id and return the id."""
    epic_id = _next_id(state)
    state.epics[epic_id] = epic
    logger.info(f"Added epic {epic_id}: {epic.name}")
    return epic_id


def update_epic_status(state: DBState, epic_id: int, status: Status) -> None:
    """Set an epic's status. Stories are left alone."""
    epic = get_epic(state, epic_id)
    logger.debug(f"Epic {epic_id} status {epic.status.value} -> {status.value}")
    epic.status = status


def delete_epic(state: DBState, epic_id: int) -> None:
    """Remove an epic together with every story it lists.

    Raises:
        NotFoundError: if the epic does not exist (state unchanged)
    """
    epic = get_epic(state, epic_id)
    del state.epics[epic_id]
    for story_id in epic.stories:
        if state.stories.pop(story_id, None) is None:
            logger.warning(f"Epic {epic_id} listed missing story {story_id}")
    logger.info(f"Deleted epic {epic_id} and {len(epic.stories)} story(s)")


def add_story(state: DBState, story: Story, epic_id: int) -> int:
    """Insert a story under a fresh id and link it to its epic.

    The epic is resolved first; if it is missing the counter is not advanced.

    Returns:
        The new story id

    Raises:
        NotFoundError: if the epic does not exist
    """
    epic = get_epic(state, epic_id)
    story_id = _next_id(state)
    state.stories[story_id] = story
    epic.stories.append(story_id)
    logger.info(f"Added story {story_id} to epic {epic_id}: {story.name}")
    return story_id


def update_story_status(state: DBState, story_id: int, status: Status) -> None:
    """Set a story's status."""
    story = get_story(state, story_id)
    logger.debug(f"Story {story_id} status {story.status.value} -> {status.value}")
    story.status = status


def delete_story(state: DBState, epic_id: int, story_id: int) -> None:
    """Remove a story and unlink it from its epic.

    The story id is checked before the epic id, and both are checked before
    anything is removed: a valid story paired with the wrong epic leaves
    the state untouched.

    Raises:
        NotFoundError: for the story if it is missing, else for the epic;
            also for the story if the epic does not list it
    """
    get_story(state, story_id)
    epic = get_epic(state, epic_id)
    if story_id not in epic.stories:
        raise NotFoundError(story_id, "story", context=f"epic {epic_id}")

    del state.stories[story_id]
    epic.stories = [s for s in epic.stories if s != story_id]
    logger.info(f"Deleted story {story_id} from epic {epic_id}")
