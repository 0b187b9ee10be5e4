"""
GG Time CLI - Command-line interface for session payloads.

Usage:
    ggtime create --game <name> --host <name> [--at <iso time>]
    ggtime respond <payload> --name <viewer> --action <action> [--at <iso time>]
    ggtime inspect <payload>

Handy for producing sample payloads and checking what a message carries.
"""

from datetime import datetime, timedelta
import argparse
import sys

from .api.schemas import ResponseAction
from .config import Settings
from .host import OutgoingMessage, SessionController
from .log_config import setup_logging
from .session import GameSession


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="GG Time - gaming session payloads",
        prog="ggtime",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Create command
    create_parser = subparsers.add_parser("create", help="Propose a new session")
    create_parser.add_argument("--game", required=True, help="Game name")
    create_parser.add_argument("--host", required=True, help="Host display name")
    create_parser.add_argument("--at", help="Start time (ISO-8601); defaults to one hour from now")

    # Respond command
    respond_parser = subparsers.add_parser("respond", help="Answer a session payload")
    respond_parser.add_argument("payload", help="Session payload URL")
    respond_parser.add_argument("--name", required=True, help="Viewer display name")
    respond_parser.add_argument("--identity", help="Viewer participant identifier")
    respond_parser.add_argument(
        "--action",
        required=True,
        choices=[a.value for a in ResponseAction],
        help="Response to apply",
    )
    respond_parser.add_argument("--at", help="Proposed time for join_at_time (ISO-8601)")

    # Inspect command
    inspect_parser = subparsers.add_parser("inspect", help="Decode a session payload")
    inspect_parser.add_argument("payload", help="Session payload URL")

    args = parser.parse_args(argv)

    settings = Settings.from_env()
    setup_logging(settings)

    if args.command == "create":
        cmd_create(args, settings)
    elif args.command == "respond":
        cmd_respond(args, settings)
    elif args.command == "inspect":
        cmd_inspect(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_create(args, settings: Settings):
    """Propose a new session."""
    start_time = _parse_time(args.at) if args.at else datetime.now().astimezone() + timedelta(hours=1)

    controller = SessionController(args.host, key=settings.participant_key)
    message = controller.create_session(args.game, start_time)
    if message is None:
        print("Error: Session could not be encoded")
        sys.exit(1)

    _print_message(message)


def cmd_respond(args, settings: Settings):
    """Answer a session payload."""
    action = ResponseAction(args.action)
    if action == ResponseAction.JOIN_AT_TIME and not args.at:
        print("Error: --at is required for join_at_time")
        sys.exit(1)

    controller = SessionController(
        args.name,
        viewer_identity=args.identity,
        key=settings.participant_key,
    )
    if controller.receive(args.payload) is None:
        print("Error: Payload is not a valid session")
        sys.exit(1)

    if action == ResponseAction.JOIN:
        message = controller.join()
    elif action == ResponseAction.MAYBE:
        message = controller.maybe()
    elif action == ResponseAction.CANT_JOIN:
        message = controller.cant_join()
    elif action == ResponseAction.JOIN_AT_TIME:
        message = controller.join_at_time(_parse_time(args.at))
    else:
        message = controller.leave()

    if message is None:
        print("Error: Session could not be encoded")
        sys.exit(1)

    _print_message(message)


def cmd_inspect(args):
    """Decode a session payload."""
    controller = SessionController("")
    session = controller.receive(args.payload)
    if session is None:
        print("Error: Payload is not a valid session")
        sys.exit(1)

    _print_session(session)


def _parse_time(value: str) -> datetime:
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        print(f"Error: Not an ISO-8601 time: {value}")
        sys.exit(1)
    return moment if moment.tzinfo is not None else moment.astimezone()


def _print_message(message: OutgoingMessage):
    print(f"Payload: {message.payload}")
    print(f"Caption: {message.layout.caption}")
    print(f"Subcaption: {message.layout.subcaption}")
    print(f"Trailing: {message.layout.trailing_caption}")
    print(f"Summary: {message.summary_text}")


def _print_session(session: GameSession):
    print(f"Game: {session.game_name}")
    print(f"Host: {session.host_name}")
    print(f"When: {session.formatted_date} at {session.formatted_time}")
    print(f"Session: {session.id}")

    if not session.participants:
        print("\nNo one joined yet")
        return

    print("\nParticipants:")
    for p in session.participants:
        line = f"  - {p.name}: {p.status.value}"
        if p.join_time is not None:
            line += f" ({p.join_time.isoformat()})"
        print(line)


if __name__ == "__main__":
    main()
