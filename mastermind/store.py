"""
In-memory store
Holds the reference server's games in memory. Nothing survives a restart.
"""

from dataclasses import dataclass
from threading import RLock
from typing import Dict, Optional
from uuid import uuid4

from .engine import Score, is_win, score_guess
from .types import Code


@dataclass
class Game:
    id: str
    secret: Code
    guesses: int = 0
    solved: bool = False


class GameStore:
    def __init__(self) -> None:
        self._games: Dict[str, Game] = {}
        # FastAPI runs sync routes in a thread pool
        self._lock = RLock()

    def create(self, secret: Code) -> str:
        new_id = str(uuid4())
        with self._lock:
            self._games[new_id] = Game(id=new_id, secret=secret)
        return new_id

    def get(self, game_id: str) -> Optional[Game]:
        with self._lock:
            return self._games.get(game_id)

    def guess(self, game_id: str, attempt: Code) -> Optional[Score]:
        """Score `attempt` against the game's secret; None if the game does not exist."""
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None

            score = score_guess(attempt, game.secret)
            game.guesses += 1
            if is_win(score):
                game.solved = True
            return score

    def get_secret(self, game_id: str) -> Optional[Code]:
        with self._lock:
            game = self._games.get(game_id)
            return game.secret if game else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)
