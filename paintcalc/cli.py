"""
Command-line interface for the paint calculator.

Notes
-----
The CLI is intentionally thin. It parses arguments, applies one mutation to a
Session and prints results. All business logic lives in paint_engine.

Exit codes
----------
- 0: success
- 1: the state store could not be opened or read
- 2: a referenced paint, room or wall id does not exist
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from paint_engine.model import PaintField, WallField, find_room
from paint_engine.render import render_paints_text, render_rooms_text, render_totals_text
from paint_engine.session import Session
from paint_engine.state_store.errors import StateStoreError
from paint_engine.state_store.sqlite_store import open_state_store


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="paintcalc",
        description="Paint cost calculator: paints, rooms, walls and totals",
    )
    parser.add_argument(
        "--data-root",
        type=Path,
        default=None,
        help="Override the data root (default: PAINTCALC_DATA_ROOT or the per-user data dir).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    # paint
    paint_p = sub.add_parser("paint", help="Manage the paint catalogue")
    paint_sub = paint_p.add_subparsers(dest="action", required=True)
    paint_sub.add_parser("list", help="List paints")

    paint_add = paint_sub.add_parser("add", help="Add a paint and print its id")
    paint_add.add_argument("--name", default=None)
    paint_add.add_argument("--code", default=None)
    paint_add.add_argument("--coverage", default=None, help="m² covered per liter")
    paint_add.add_argument("--price", default=None, help="€ per m²")

    paint_set = paint_sub.add_parser("set", help="Set one paint field")
    paint_set.add_argument("paint_id")
    paint_set.add_argument("field", choices=[f.value for f in PaintField])
    paint_set.add_argument("value")

    paint_del = paint_sub.add_parser("delete", help="Delete a paint (walls keep their reference)")
    paint_del.add_argument("paint_id")

    # room
    room_p = sub.add_parser("room", help="Manage rooms")
    room_sub = room_p.add_subparsers(dest="action", required=True)
    room_sub.add_parser("list", help="List rooms and their walls")

    room_add = room_sub.add_parser("add", help="Add a room and print its id")
    room_add.add_argument("--name", default=None)

    room_rename = room_sub.add_parser("rename", help="Rename a room")
    room_rename.add_argument("room_id")
    room_rename.add_argument("name")

    room_del = room_sub.add_parser("delete", help="Delete a room and all of its walls")
    room_del.add_argument("room_id")

    # wall
    wall_p = sub.add_parser("wall", help="Manage walls within a room")
    wall_sub = wall_p.add_subparsers(dest="action", required=True)

    wall_add = wall_sub.add_parser("add", help="Add a wall to a room and print its id")
    wall_add.add_argument("room_id")
    wall_add.add_argument("--name", default=None)
    wall_add.add_argument("--length", default=None, help="meters")
    wall_add.add_argument("--height", default=None, help="meters")
    wall_add.add_argument("--paint", dest="paint_id", default=None, help="paint id")

    wall_set = wall_sub.add_parser("set", help="Set one wall field")
    wall_set.add_argument("room_id")
    wall_set.add_argument("wall_id")
    wall_set.add_argument("field", choices=[f.value for f in WallField])
    wall_set.add_argument("value")

    wall_del = wall_sub.add_parser("delete", help="Delete a wall")
    wall_del.add_argument("room_id")
    wall_del.add_argument("wall_id")

    sub.add_parser("summary", help="Print paint totals and the grand total cost")
    sub.add_parser("gui", help="Launch the desktop application")

    return parser


def _paint_command(session: Session, args: argparse.Namespace) -> int:
    if args.action == "list":
        print(render_paints_text(session.paints))
        return 0

    if args.action == "add":
        paint_id = session.add_paint()
        for field in PaintField:
            value = getattr(args, field.value)
            if value is not None:
                session.update_paint(paint_id, field, value)
        print(paint_id)
        return 0

    if not any(p.id == args.paint_id for p in session.paints):
        print(f"ERROR: unknown paint id: {args.paint_id}")
        return 2

    if args.action == "set":
        session.update_paint(args.paint_id, args.field, args.value)
    elif args.action == "delete":
        session.delete_paint(args.paint_id)
    return 0


def _room_command(session: Session, args: argparse.Namespace) -> int:
    if args.action == "list":
        print(render_rooms_text(session.paints, session.rooms))
        return 0

    if args.action == "add":
        room_id = session.add_room()
        if args.name is not None:
            session.update_room(room_id, "name", args.name)
        print(room_id)
        return 0

    if find_room(session.rooms, args.room_id) is None:
        print(f"ERROR: unknown room id: {args.room_id}")
        return 2

    if args.action == "rename":
        session.update_room(args.room_id, "name", args.name)
    elif args.action == "delete":
        session.delete_room(args.room_id)
    return 0


def _wall_command(session: Session, args: argparse.Namespace) -> int:
    room = find_room(session.rooms, args.room_id)
    if room is None:
        print(f"ERROR: unknown room id: {args.room_id}")
        return 2

    if args.action == "add":
        wall_id = session.add_wall(args.room_id)
        assert wall_id is not None
        for field in WallField:
            value = getattr(args, field.value)
            if value is not None:
                session.update_wall(args.room_id, wall_id, field, value)
        print(wall_id)
        return 0

    if not any(w.id == args.wall_id for w in room.walls):
        print(f"ERROR: unknown wall id: {args.wall_id}")
        return 2

    if args.action == "set":
        session.update_wall(args.room_id, args.wall_id, args.field, args.value)
    elif args.action == "delete":
        session.delete_wall(args.room_id, args.wall_id)
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    CLI entry point.

    Parameters
    ----------
    argv:
        Optional argument vector. If None, argparse uses sys.argv.

    Returns
    -------
    int
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "gui":
        # Imported lazily so the CLI works without a Qt installation.
        from gui.app import run_app

        return run_app(data_root=args.data_root)

    try:
        session = Session(open_state_store(args.data_root))
    except StateStoreError as exc:
        print(f"ERROR: {exc}")
        return 1

    if args.command == "paint":
        rc = _paint_command(session, args)
    elif args.command == "room":
        rc = _room_command(session, args)
    elif args.command == "wall":
        rc = _wall_command(session, args)
    elif args.command == "summary":
        print(render_totals_text(session.paints, session.totals()))
        rc = 0
    else:
        parser.print_help()
        return 0

    if session.last_save_error is not None:
        print(f"ERROR: {session.last_save_error}")
        return 1
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
