"""
et epic - Create, inspect, update and delete epics.
"""

import sys

from epictracker.models import Epic, Status
from epictracker.state import get_epic
from epictracker.tracker import TrackerDatabase


def cmd_epic_add(args, tracker: TrackerDatabase) -> int:
    epic_id = tracker.create_epic(Epic(args.name, args.description))
    print(f"Created epic {epic_id}: {args.name}")
    return 0


def cmd_epic_show(args, tracker: TrackerDatabase) -> int:
    """Show an epic and its stories."""
    db_state = tracker.read_db()
    epic = get_epic(db_state, args.id)

    print(f"Epic {args.id}: {epic.name}")
    print(f"  Status:      {epic.status.display}")
    print(f"  Description: {epic.description}")
    if epic.stories:
        print("  Stories:")
        for story_id in epic.stories:
            story = db_state.stories.get(story_id)
            if story is None:
                print(f"    {story_id:<6} (missing)")
                continue
            print(f"    {story_id:<6} {story.status.display:<12} {story.name}")
    else:
        print("  Stories:     none")
    return 0


def cmd_epic_status(args, tracker: TrackerDatabase) -> int:
    try:
        status = Status.parse(args.status)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    tracker.update_epic_status(args.id, status)
    print(f"Epic {args.id} is now {status.display}")
    return 0


def cmd_epic_delete(args, tracker: TrackerDatabase) -> int:
    tracker.delete_epic(args.id)
    print(f"Deleted epic {args.id} and its stories")
    return 0
