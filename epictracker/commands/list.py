"""
et list - List epics and their stories.
"""

from epictracker.tracker import TrackerDatabase


def _truncate(text: str, width: int) -> str:
    return text[:width - 3] + "..." if len(text) > width else text


def cmd_list(args, tracker: TrackerDatabase) -> int:
    """List all epics with their stories."""
    db_state = tracker.read_db()

    if not db_state.epics:
        print("Epics: none")
        print()
        print("Get started:")
        print('  et epic add "Name" "Description"')
        return 0

    print("Epics")
    print("-" * 60)
    for epic_id, epic in sorted(db_state.epics.items()):
        print(f"  {epic_id:<6} {epic.status.display:<12} {_truncate(epic.name, 40)}")
        for story_id in epic.stories:
            story = db_state.stories.get(story_id)
            if story is None:
                print(f"    - {story_id:<6} (missing)")
                continue
            print(f"    - {story_id:<6} {story.status.display:<12} {_truncate(story.name, 36)}")
    print()
    print(f"{len(db_state.epics)} epic(s), {len(db_state.stories)} story(s)")
    return 0
