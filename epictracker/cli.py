#!/usr/bin/env python3
"""Tracker CLI entrypoint."""

import sys
import logging
import argparse
from pathlib import Path

from epictracker.lib.config import load_config
from epictracker.lib.errors import NotFoundError, ParseError, StorageIOError
from epictracker.lib.storage import JSONFileDatabase
from epictracker.tracker import TrackerDatabase
from epictracker.commands import epic as cmd_epic_module
from epictracker.commands import story as cmd_story_module
from epictracker.commands import list as cmd_list_module

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='et', description='Epic and story tracker')
    parser.add_argument('--db', type=Path, help='Database file (overrides TRACKER_DB_PATH)')
    parser.add_argument('--config', type=Path, help='Env file to load (default: ./tracker.env)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # et list
    p_list = subparsers.add_parser('list', help='List epics and stories')
    p_list.set_defaults(func=cmd_list_module.cmd_list)

    # et epic
    p_epic = subparsers.add_parser('epic', help='Manage epics')
    epic_sub = p_epic.add_subparsers(dest='epic_cmd', required=True)

    p_epic_add = epic_sub.add_parser('add', help='Create epic')
    p_epic_add.add_argument('name', help='Epic name')
    p_epic_add.add_argument('description', help='Epic description')
    p_epic_add.set_defaults(func=cmd_epic_module.cmd_epic_add)

    p_epic_show = epic_sub.add_parser('show', help='Show epic details')
    p_epic_show.add_argument('id', type=int, help='Epic ID')
    p_epic_show.set_defaults(func=cmd_epic_module.cmd_epic_show)

    p_epic_status = epic_sub.add_parser('status', help='Set epic status')
    p_epic_status.add_argument('id', type=int, help='Epic ID')
    p_epic_status.add_argument('status', help='Open, InProgress, Resolved or Closed')
    p_epic_status.set_defaults(func=cmd_epic_module.cmd_epic_status)

    p_epic_delete = epic_sub.add_parser('delete', help='Delete epic and all its stories')
    p_epic_delete.add_argument('id', type=int, help='Epic ID')
    p_epic_delete.set_defaults(func=cmd_epic_module.cmd_epic_delete)

    # et story
    p_story = subparsers.add_parser('story', help='Manage stories')
    story_sub = p_story.add_subparsers(dest='story_cmd', required=True)

    p_story_add = story_sub.add_parser('add', help='Create story in an epic')
    p_story_add.add_argument('epic_id', type=int, help='Owning epic ID')
    p_story_add.add_argument('name', help='Story name')
    p_story_add.add_argument('description', help='Story description')
    p_story_add.set_defaults(func=cmd_story_module.cmd_story_add)

    p_story_show = story_sub.add_parser('show', help='Show story details')
    p_story_show.add_argument('id', type=int, help='Story ID')
    p_story_show.set_defaults(func=cmd_story_module.cmd_story_show)

    p_story_status = story_sub.add_parser('status', help='Set story status')
    p_story_status.add_argument('id', type=int, help='Story ID')
    p_story_status.add_argument('status', help='Open, InProgress, Resolved or Closed')
    p_story_status.set_defaults(func=cmd_story_module.cmd_story_status)

    p_story_delete = story_sub.add_parser('delete', help='Delete story')
    p_story_delete.add_argument('epic_id', type=int, help='Owning epic ID')
    p_story_delete.add_argument('story_id', type=int, help='Story ID')
    p_story_delete.set_defaults(func=cmd_story_module.cmd_story_delete)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    db_path = args.db or config.db_path
    tracker = TrackerDatabase(JSONFileDatabase(db_path, create_if_missing=config.create_if_missing))
    logger.debug(f"Using database {db_path}")

    try:
        return args.func(args, tracker)
    except NotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except (ParseError, StorageIOError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
