"""
Command-line entry point: parse flags, set up logging, run one session.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_settings
from .remote_client import RemoteGameService
from .session import LineIO, RemoteHandle, open_session

logger = logging.getLogger(__name__)


class ConsoleIO:
    """Line I/O over the process's stdin/stdout."""

    def read_line(self, prompt: str) -> Optional[str]:
        try:
            return input(prompt + " ")
        except EOFError:
            # finish the prompt line before returning
            print()
            return None

    def write(self, text: str) -> None:
        print(text, flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mastermind",
        description="Guess a hidden 4-digit code (digits 1-6). B = right digit, right place; W = right digit, wrong place.",
    )
    parser.add_argument(
        "--remote",
        action="store_true",
        help="Let the remote game service hold the secret (falls back to local if it is unreachable).",
    )
    parser.add_argument(
        "--api-base",
        default=None,
        help="Base URL of the remote game service (default: $MASTERMIND_API_BASE or the public server).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for each remote request (default: $MASTERMIND_TIMEOUT or 10).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    return parser


def main(argv: Optional[List[str]] = None, io: Optional[LineIO] = None) -> int:
    args = build_parser().parse_args(argv)
    io = io or ConsoleIO()

    try:
        settings = load_settings().with_overrides(api_base=args.api_base, timeout_seconds=args.timeout)
    except RuntimeError as exc:
        print(f"mastermind: {exc}", file=sys.stderr)
        return 2

    level = logging.DEBUG if args.verbose else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    io.write("=== Mastermind (terminal) ===")
    io.write("Rules: guess a 4-digit code; digits 1..6. Type 'exit' anytime to quit.")
    io.write("Mode: " + ("REMOTE (API)" if args.remote else "LOCAL"))

    service = None
    if args.remote:
        io.write("Creating remote game...")
        service = RemoteGameService(settings.api_base, settings.timeout_seconds)

    session = open_session(remote=args.remote, service=service)
    if isinstance(session.backing, RemoteHandle):
        io.write(f"Remote game id: {session.backing.game_id}")

    outcome = session.play(io)
    logger.debug("Session finished: %s", outcome)
    return 0
