"""
Explicit validation & Pydantic models
- Bodies exchanged with the remote game service.
- The terminal client validates what the server sends back; the reference
  server (server.py) uses the same models for its routes.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from .types import CODE_LENGTH, MAX_DIGIT, MIN_DIGIT


# 1. Response when a new remote game is created
class CreateGameResponse(BaseModel):
    game_id: str = Field(..., min_length=1, description="Opaque id; the secret stays on the server")


# 2. A guess sent to the server, digits as text ("1234")
class GuessRequest(BaseModel):
    game_id: str = Field(..., description="Id returned by POST /game")
    guess: str = Field(..., description="Exactly 4 characters, each a digit between 1 and 6")

    @field_validator("guess")
    @classmethod
    def validate_digits(cls, guess: str) -> str:
        if len(guess) != CODE_LENGTH:
            raise ValueError(f"Guess must have exactly {CODE_LENGTH} digits.")
        for ch in guess:
            if not ("0" <= ch <= "9") or not (MIN_DIGIT <= int(ch) <= MAX_DIGIT):
                raise ValueError(f"Each digit must be between {MIN_DIGIT} and {MAX_DIGIT} inclusive.")
        return guess

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"game_id": "3f0c7d0e-6a4e-4a53-9d3a-4f9e2c1b7a10", "guess": "1234"},
            ]
        }
    }


# 3. Feedback for a single guess, computed server-side
class GuessResponse(BaseModel):
    black: int = Field(..., ge=0, le=CODE_LENGTH, description="Right digit, right place")
    white: int = Field(..., ge=0, le=CODE_LENGTH, description="Right digit, wrong place")

    @model_validator(mode="after")
    def check_total(self) -> "GuessResponse":
        if self.black + self.white > CODE_LENGTH:
            raise ValueError(f"black + white cannot exceed {CODE_LENGTH}.")
        return self
