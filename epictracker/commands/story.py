"""
et story - Create, inspect, update and delete stories.
"""

import sys

from epictracker.models import Status, Story
from epictracker.state import find_epic_for_story, get_story
from epictracker.tracker import TrackerDatabase


def cmd_story_add(args, tracker: TrackerDatabase) -> int:
    story_id = tracker.create_story(Story(args.name, args.description), args.epic_id)
    print(f"Created story {story_id} in epic {args.epic_id}: {args.name}")
    return 0


def cmd_story_show(args, tracker: TrackerDatabase) -> int:
    db_state = tracker.read_db()
    story = get_story(db_state, args.id)
    epic_id = find_epic_for_story(db_state, args.id)

    print(f"Story {args.id}: {story.name}")
    print(f"  Status:      {story.status.display}")
    print(f"  Description: {story.description}")
    if epic_id is not None:
        print(f"  Epic:        {epic_id} ({db_state.epics[epic_id].name})")
    return 0


def cmd_story_status(args, tracker: TrackerDatabase) -> int:
    try:
        status = Status.parse(args.status)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    tracker.update_story_status(args.id, status)
    print(f"Story {args.id} is now {status.display}")
    return 0


def cmd_story_delete(args, tracker: TrackerDatabase) -> int:
    tracker.delete_story(args.epic_id, args.story_id)
    print(f"Deleted story {args.story_id} from epic {args.epic_id}")
    return 0
