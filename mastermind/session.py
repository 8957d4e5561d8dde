"""
One game of Mastermind, from secret to win or quit.

The session owns either a local secret or a remote game id (never both),
counts valid guesses, and turns each line of player input into a TurnResult.
Nothing here touches the terminal directly: play() talks to a LineIO
collaborator and returns a SessionOutcome instead of exiting the process.

States:
  initializing -> awaiting_guess -> scored -> awaiting_guess ... -> won
  awaiting_guess -> aborted (exit / end of input / input failure)
"""

import logging
from dataclasses import dataclass, field
from secrets import randbelow
from typing import Callable, List, Literal, Optional, Protocol, Union

from .engine import Score, format_code, format_feedback, is_win, parse_guess, random_secret, score_guess
from .errors import RemoteServiceError, SessionOver
from .types import Code, EndReason, Mode, SessionState

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"

INVALID_GUESS_MESSAGE = (
    "Invalid guess. Make sure it's exactly 4 digits, each between 1 and 6. Try again or type 'exit'."
)
REMOTE_FALLBACK_WARNING = "Failed to create remote game. Falling back to LOCAL mode."
REMOTE_GUESS_FAILED_MESSAGE = "Remote guess failed. If network/API is down, you can restart without --remote."
GOODBYE_MESSAGE = "Bye 👋"


# --- Collaborators ---

class GameService(Protocol):
    def create_game(self) -> str: ...

    def submit_guess(self, game_id: str, code: Code) -> Score: ...


class LineIO(Protocol):
    def read_line(self, prompt: str) -> Optional[str]:
        """Return one line, or None at end of input."""
        ...

    def write(self, text: str) -> None: ...


# --- Session backing: exactly one of these ---

@dataclass(frozen=True)
class LocalSecret:
    secret: Code


@dataclass(frozen=True)
class RemoteHandle:
    game_id: str


Backing = Union[LocalSecret, RemoteHandle]


# --- Results handed back to the caller ---

TurnKind = Literal["rejected", "scored", "failed", "won", "aborted"]


@dataclass
class TurnResult:
    kind: TurnKind
    messages: List[str] = field(default_factory=list)
    score: Optional[Score] = None


@dataclass(frozen=True)
class SessionOutcome:
    reason: EndReason
    attempts: int
    mode: Mode
    secret: Optional[str] = None  # only set on a local win
    detail: Optional[str] = None  # "exit" | "eof" | "io_error" when aborted


def is_exit_command(line: str) -> bool:
    return line.strip().lower() == EXIT_COMMAND


class GameSession:
    def __init__(self, backing: Backing, service: Optional[GameService] = None) -> None:
        if isinstance(backing, RemoteHandle) and service is None:
            raise ValueError("A remote session needs a game service to score guesses.")
        self._backing = backing
        self._service = service
        self.attempts = 0
        self.state: SessionState = "awaiting_guess"
        self.warnings: List[str] = []
        self._outcome: Optional[SessionOutcome] = None

    @property
    def mode(self) -> Mode:
        return "remote" if isinstance(self._backing, RemoteHandle) else "local"

    @property
    def backing(self) -> Backing:
        return self._backing

    @property
    def is_over(self) -> bool:
        return self.state in ("won", "aborted")

    def outcome(self) -> Optional[SessionOutcome]:
        return self._outcome

    def handle_line(self, line: Optional[str]) -> TurnResult:
        """Process one line of player input (None means end of input)."""
        if self.is_over:
            raise SessionOver(f"Session already ended ({self.state}).")

        if line is None:
            return self._abort("eof")
        if is_exit_command(line):
            return self._abort("exit", [GOODBYE_MESSAGE])

        code = parse_guess(line)
        if code is None:
            # state and attempt counter stay as they are
            return TurnResult("rejected", [INVALID_GUESS_MESSAGE])

        self.attempts += 1
        self.state = "scored"

        if isinstance(self._backing, RemoteHandle):
            try:
                score = self._service.submit_guess(self._backing.game_id, code)
            except RemoteServiceError as exc:
                logger.warning("Attempt %s could not be scored remotely: %s", self.attempts, exc)
                self.state = "awaiting_guess"
                return TurnResult("failed", [REMOTE_GUESS_FAILED_MESSAGE])
        else:
            score = score_guess(code, self._backing.secret)

        logger.debug("Attempt %s scored %s", self.attempts, score)
        messages = [format_feedback(score)]

        if not is_win(score):
            self.state = "awaiting_guess"
            return TurnResult("scored", messages, score)

        self.state = "won"
        messages.append(f"Congratulations! You found the code in {self.attempts} attempts.")
        secret = None
        if isinstance(self._backing, LocalSecret):
            secret = format_code(self._backing.secret)
            messages.append(f"Secret was: {secret}")
        self._outcome = SessionOutcome("won", self.attempts, self.mode, secret=secret)
        return TurnResult("won", messages, score)

    def play(self, io: LineIO) -> SessionOutcome:
        """Run turns against `io` until the game is won or the player leaves."""
        for warning in self.warnings:
            io.write(warning)

        while not self.is_over:
            prompt = f"Attempt #{self.attempts + 1} — enter your guess (4 digits 1-6):"
            try:
                line = io.read_line(prompt)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Reading player input failed: %s", exc)
                result = self._abort("io_error", [f"Could not read input: {exc}"])
            else:
                result = self.handle_line(line)

            for message in result.messages:
                io.write(message)

        return self._outcome

    def _abort(self, detail: str, messages: Optional[List[str]] = None) -> TurnResult:
        logger.debug("Session aborted (%s) after %s attempts", detail, self.attempts)
        self.state = "aborted"
        self._outcome = SessionOutcome("aborted", self.attempts, self.mode, detail=detail)
        return TurnResult("aborted", messages or [])


def open_session(
    remote: bool = False,
    service: Optional[GameService] = None,
    draw: Callable[[int], int] = randbelow,
) -> GameSession:
    """
    Start a session. Remote mode asks the service for a game; if that fails
    we fall back to a local secret and leave a warning on the session.
    """
    if remote:
        if service is None:
            raise ValueError("Remote mode needs a game service.")
        try:
            game_id = service.create_game()
        except RemoteServiceError as exc:
            logger.warning("Remote game creation failed, using a local secret: %s", exc)
            session = GameSession(LocalSecret(random_secret(draw)))
            session.warnings.append(REMOTE_FALLBACK_WARNING)
            return session
        logger.info("Remote game id: %s", game_id)
        return GameSession(RemoteHandle(game_id), service)

    return GameSession(LocalSecret(random_secret(draw)))
