"""
- ScriptedIO: feeds prepared lines to a session and records everything written.
- FakeService: a remote game service double with a fixed secret and switchable failures.
- A fresh in-memory store for the reference server, plus a TestClient bound to it.
"""
import os
import pytest

from fastapi.testclient import TestClient

# Keep a developer's .env from leaking into the tests
os.environ.setdefault("MASTERMIND_API_BASE", "http://testserver")

from mastermind.engine import score_guess
from mastermind.errors import RemoteServiceError
from mastermind.server import app, get_secret_factory, get_store
from mastermind.store import GameStore


class ScriptedIO:
    """Returns the given lines one by one, then None (end of input)."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []
        self.output = []

    def read_line(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            return None
        line = self.lines.pop(0)
        if isinstance(line, Exception):
            raise line
        return line

    def write(self, text):
        self.output.append(text)


class FakeService:
    def __init__(self, secret=(1, 2, 3, 4), fail_create=False):
        self.secret = tuple(secret)
        self.fail_create = fail_create
        self.fail_guesses = 0
        self.created = 0
        self.submitted = []

    def create_game(self):
        if self.fail_create:
            raise RemoteServiceError("Create game failed: HTTP 503 unavailable")
        self.created += 1
        return f"game-{self.created}"

    def submit_guess(self, game_id, code):
        self.submitted.append((game_id, code))
        if self.fail_guesses:
            self.fail_guesses -= 1
            raise RemoteServiceError("Error in guess request: connection refused")
        return score_guess(code, self.secret)


@pytest.fixture
def fake_service():
    return FakeService()


@pytest.fixture
def scripted_io():
    return ScriptedIO


@pytest.fixture
def store():
    return GameStore()


@pytest.fixture
def client(store):
    """
    In-process reference server. The store is swapped for a fresh one and the
    secret is fixed to 1234 so outcomes are predictable.
    """
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_secret_factory] = lambda: (lambda: (1, 2, 3, 4))
    yield TestClient(app)
    app.dependency_overrides.clear()
