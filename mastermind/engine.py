"""
Pure game logic (no HTTP, no terminal).
We compute two feedback numbers for each guess:
- exact: how many positions hold the right digit (black pegs)
- color: how many of the remaining digits appear somewhere else in the secret
  (white pegs), each occurrence used at most once on both sides

Duplicates are allowed in both the secret and the guess.
"""

from secrets import randbelow
from typing import Callable, NamedTuple, Optional

from .types import CODE_LENGTH, MAX_DIGIT, MIN_DIGIT, Code


class Score(NamedTuple):
    exact: int
    color: int


def score_guess(guess: Code, secret: Code) -> Score:
    """
    Example:
      guess  = (1, 1, 2, 2)
      secret = (1, 1, 1, 1)
      exact = 2  (the first two 1s)
      color = 0  (the 2s are not in the secret, the other 1s are used up)
    """
    if len(guess) != CODE_LENGTH or len(secret) != CODE_LENGTH:
        raise ValueError(f"Guess and secret must both have {CODE_LENGTH} digits.")

    # 1. Exact matches; everything else goes into per-digit tables (index 1..6)
    exact = 0
    guess_counts = [0] * (MAX_DIGIT + 1)
    secret_counts = [0] * (MAX_DIGIT + 1)
    for g, s in zip(guess, secret):
        if g == s:
            exact += 1
        else:
            guess_counts[g] += 1
            secret_counts[s] += 1

    # 2. Overlap of the leftovers is the sum of the smaller count per digit
    color = 0
    for digit in range(MIN_DIGIT, MAX_DIGIT + 1):
        color += min(guess_counts[digit], secret_counts[digit])

    return Score(exact, color)


def is_win(score: Score) -> bool:
    return score.exact == CODE_LENGTH


def parse_guess(text: str) -> Optional[Code]:
    """
    Turn player text like " 1234 " into (1, 2, 3, 4).
    Returns None when the text is not exactly 4 characters, each a digit 1..6.
    """
    trimmed = text.strip()
    if len(trimmed) != CODE_LENGTH:
        return None

    digits = []
    for ch in trimmed:
        # isdigit() accepts things like "²", so compare against the ASCII range
        if ch < "0" or ch > "9":
            return None
        value = int(ch)
        if value < MIN_DIGIT or value > MAX_DIGIT:
            return None
        digits.append(value)
    return tuple(digits)


def random_secret(draw: Callable[[int], int] = randbelow) -> Code:
    # randbelow(6) gives 0..5, shift to 1..6
    span = MAX_DIGIT - MIN_DIGIT + 1
    return tuple(draw(span) + MIN_DIGIT for _ in range(CODE_LENGTH))


def format_code(code: Code) -> str:
    return "".join(str(d) for d in code)


def format_feedback(score: Score) -> str:
    """'B' per exact match followed by 'W' per color match, e.g. (2, 1) -> 'BBW'."""
    return "B" * score.exact + "W" * score.color
