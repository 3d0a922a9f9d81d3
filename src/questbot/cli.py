"""Command-line interface for questbot.

This module provides the CLI entry point. It supports three commands:
- run: load a bot from a handlers file and process one message locally
- validate: check a model response for JSON, optionally against a schema
- server: serve the bot over HTTP with uvicorn
"""
import argparse
import importlib.util
import json
import logging
import os
import sys
from pathlib import Path

from questbot.channels.cli import CliChannel
from questbot.http import process_activity
from questbot.validation import Invalid, JSONResponseValidator

logger = logging.getLogger("questbot.cli")

DEFAULT_PORT = 3978
SERVER_DESCRIPTION = (
    "Serve the bot over HTTP. Replies are posted to the connector without "
    "Bot Framework authentication, so only the Emulator and other local "
    "connectors accept them."
)


def load_app(path: str):
    """Dynamically load a questbot app from a Python file.

    Uses importlib to dynamically import a Python module and extract its
    'app' attribute, which should be an instance of questbot.core.app.App.

    Args:
        path: File path to the Python module containing the app.

    Returns:
        The app object from the loaded module.

    Raises:
        FileNotFoundError: If the file cannot be found or the module spec
            cannot be created.
        AttributeError: If the loaded module does not have an 'app' attribute.
    """
    spec = importlib.util.spec_from_file_location("handlers", path)
    if spec is None or spec.loader is None:
        raise FileNotFoundError(path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app


def default_port() -> int:
    """Port from the `port` or `PORT` environment variable, or 3978."""
    return int(os.environ.get("port") or os.environ.get("PORT") or DEFAULT_PORT)


def _read_text(path: str | None) -> str:
    if path is None:
        return sys.stdin.read()
    return Path(path).read_text()


def run_command(args: argparse.Namespace) -> None:
    """Process one inbound activity locally, printing the bot's replies."""
    handlers_file = args.handlers_file
    try:
        app = load_app(handlers_file)
    except FileNotFoundError:
        logger.error(f"Handlers file not found: {handlers_file}")
        print(f"Error: handlers file not found: {handlers_file}", file=sys.stderr)
        sys.exit(1)
    except AttributeError:
        logger.error(f"{handlers_file} has no 'app' attribute")
        print(f"Error: {handlers_file} has no 'app' attribute", file=sys.stderr)
        sys.exit(1)

    logger.info(f"App loaded from {handlers_file}")
    text = args.text
    if args.text_file is not None:
        try:
            text = Path(args.text_file).read_text()
        except FileNotFoundError:
            logger.error(f"Text file not found: {args.text_file}")
            print(f"Error: text file not found: {args.text_file}", file=sys.stderr)
            sys.exit(1)

    channel = CliChannel(text or "", activity_type=args.type)
    if not process_activity(app, channel):
        sys.exit(1)


def validate_command(args: argparse.Namespace) -> None:
    """Validate a model response read from a file or stdin."""
    schema = None
    if args.schema is not None:
        try:
            schema = json.loads(Path(args.schema).read_text())
        except FileNotFoundError:
            print(f"Error: schema file not found: {args.schema}", file=sys.stderr)
            sys.exit(1)
        except json.JSONDecodeError as e:
            print(f"Error: schema file is not valid JSON: {e}", file=sys.stderr)
            sys.exit(1)
    try:
        text = _read_text(args.text_file)
    except FileNotFoundError:
        print(f"Error: text file not found: {args.text_file}", file=sys.stderr)
        sys.exit(1)

    result = JSONResponseValidator(schema).validate(text)
    if isinstance(result, Invalid):
        print(result.feedback, file=sys.stderr)
        sys.exit(1)
    print(json.dumps(result.value, indent=2))


def main() -> None:
    """Main entry point for the questbot CLI.

    Commands:
        run: Process one activity with the following options:
            --handlers-file: Path to Python file containing the app
                (default: handlers.py)
            --text: Message text (mutually exclusive with --text-file)
            --text-file: Path to file containing the message text
            --type: Activity type (default: message)

        validate: Validate a model response with the following options:
            --schema: Path to a JSON schema file (optional)
            --text-file: Path to the response text (default: stdin)

        server: Start the FastAPI server with the following options:
            --host: Host address to bind (default: 127.0.0.1)
            --port: Port number to bind (default: $port, $PORT or 3978)
            --reload: Enable auto-reload on code changes
            --handlers-file: Path to Python file containing the app
                (default: handlers.py)

    Raises:
        SystemExit: Exit code 0 for success, 1 for errors.

    Examples:
        questbot run --text "start a quest"
        questbot validate --schema quest.schema.json --text-file reply.txt
        questbot server --host 0.0.0.0
    """
    parser = argparse.ArgumentParser(prog="questbot")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run")
    run_parser.add_argument("--handlers-file", default="handlers.py")
    text_group = run_parser.add_mutually_exclusive_group()
    text_group.add_argument("--text", default=None)
    text_group.add_argument("--text-file", default=None)
    run_parser.add_argument("--type", default="message")

    validate_parser = subparsers.add_parser("validate")
    validate_parser.add_argument("--schema", default=None)
    validate_parser.add_argument("--text-file", default=None)
    server_parser = subparsers.add_parser("server", description=SERVER_DESCRIPTION)
    server_parser.add_argument("--host", default="127.0.0.1")
    server_parser.add_argument("--port", type=int, default=None)
    server_parser.add_argument("--reload", action="store_true")
    server_parser.add_argument("--handlers-file", default="handlers.py")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logger.debug(f"CLI args parsed: command={args.command}")

    if args.command == "run":
        run_command(args)
    elif args.command == "validate":
        validate_command(args)
    elif args.command == "server":
        import uvicorn

        os.environ["QUESTBOT_HANDLERS_FILE"] = args.handlers_file
        port = args.port if args.port is not None else default_port()
        print(f"questbot listening on http://{args.host}:{port}/api/messages")
        uvicorn.run("questbot.server:create_app", factory=True, host=args.host, port=port, reload=args.reload)


if __name__ == "__main__":
    main()
