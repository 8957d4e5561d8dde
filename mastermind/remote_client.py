"""
- HTTP calls to the remote game service, one at a time, each with a timeout
POST /game  -> {"game_id": "..."}
POST /guess -> {"black": n, "white": n}

Each call runs on a worker thread and the caller waits at most `timeout_seconds`
for the whole response, not just for each socket read.

Anything that goes wrong (no internet, timeout, non-2xx status, bad body)
becomes a RemoteServiceError. We never retry; the session decides what to do.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from typing import Any, Optional

import requests
from pydantic import ValidationError

from .config import DEFAULT_API_BASE, DEFAULT_TIMEOUT_SECONDS
from .engine import Score, format_code
from .errors import RemoteServiceError
from .schemas import CreateGameResponse, GuessRequest, GuessResponse
from .types import Code

logger = logging.getLogger(__name__)


class RemoteGameService:
    """Client for the remote Mastermind API; the server owns the secret."""

    def __init__(
        self,
        api_base: str = DEFAULT_API_BASE,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        http: Optional[Any] = None,
    ) -> None:
        self.api_base = api_base.rstrip("/")
        self.timeout_seconds = timeout_seconds
        # anything with a requests-style post() works (tests pass FastAPI's TestClient)
        self.http = http if http is not None else requests.Session()

    def create_game(self) -> str:
        body = self._post("/game", None, "Create game")
        try:
            created = CreateGameResponse.model_validate(body)
        except ValidationError as exc:
            logger.warning("Create game returned an unexpected body %r: %s", body, exc)
            raise RemoteServiceError(f"Failed to decode create response: {exc}") from exc

        logger.debug("Remote game created: %s", created.game_id)
        return created.game_id

    def submit_guess(self, game_id: str, code: Code) -> Score:
        payload = GuessRequest(game_id=game_id, guess=format_code(code))
        body = self._post("/guess", payload.model_dump(), "Guess")
        try:
            result = GuessResponse.model_validate(body)
        except ValidationError as exc:
            logger.warning("Guess returned an unexpected body %r: %s", body, exc)
            raise RemoteServiceError(f"Failed to decode guess response: {exc}") from exc

        return Score(exact=result.black, color=result.white)

    def _post(self, path: str, payload: Optional[dict], what: str) -> Any:
        url = self.api_base + path
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="mastermind-http")
        future = executor.submit(self.http.post, url, json=payload, timeout=self.timeout_seconds)
        # a stuck call is left to finish on its own thread; nothing waits for it
        executor.shutdown(wait=False)
        try:
            response = future.result(timeout=self.timeout_seconds)
        except (FutureTimeout, requests.Timeout) as exc:
            logger.warning("%s request to %s timed out after %ss", what, url, self.timeout_seconds)
            raise RemoteServiceError(f"{what} timed out after {self.timeout_seconds}s.") from exc
        except requests.RequestException as exc:
            logger.warning("%s request to %s failed: %s", what, url, exc)
            raise RemoteServiceError(f"Error in {what.lower()} request: {exc}") from exc

        if not 200 <= response.status_code < 300:
            logger.warning("%s failed: HTTP %s %s", what, response.status_code, response.text)
            raise RemoteServiceError(f"{what} failed: HTTP {response.status_code} {response.text}")

        try:
            return response.json()
        except ValueError as exc:
            # requests and httpx both raise a ValueError subclass for bad JSON
            logger.warning("%s returned a body that is not JSON: %r", what, response.text)
            raise RemoteServiceError(f"{what} returned a body that is not JSON.") from exc
