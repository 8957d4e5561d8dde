'''
Reference Mastermind game service (in-memory)

Endpoints (same contract the terminal client speaks in --remote mode):
POST /game   -> start a game, returns {"game_id": ...}
POST /guess  -> {"game_id": ..., "guess": "1234"} returns {"black": n, "white": n}

Run it locally with any ASGI server, e.g.:
    uvicorn mastermind.server:app --port 8000
    mastermind --remote --api-base http://127.0.0.1:8000
'''

from fastapi import Depends, FastAPI, HTTPException

from .engine import parse_guess, random_secret
from .schemas import CreateGameResponse, GuessRequest, GuessResponse
from .store import GameStore

app = FastAPI(title="Mastermind game service", version="1.0.0")

_store = GameStore()


# Small factory so tests can swap the store through dependency_overrides
def get_store() -> GameStore:
    return _store


def get_secret_factory():
    return random_secret


# ---------------- Routes ----------------

@app.post("/game", response_model=CreateGameResponse, summary="Start a new game")
def create_game(
    store: GameStore = Depends(get_store),
    make_secret=Depends(get_secret_factory),
) -> CreateGameResponse:
    game_id = store.create(make_secret())
    return CreateGameResponse(game_id=game_id)


@app.post("/guess", response_model=GuessResponse, summary="Score a guess")
def submit_guess(
    payload: GuessRequest,
    store: GameStore = Depends(get_store),
) -> GuessResponse:
    # GuessRequest already validated the text, so this cannot be None
    code = parse_guess(payload.guess)
    score = store.guess(payload.game_id, code)
    if score is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return GuessResponse(black=score.exact, white=score.color)
