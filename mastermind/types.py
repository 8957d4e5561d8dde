"""
Labels for clarity.
"""

from typing import Literal, Tuple

Digit = int  # 1 -> 6
Code = Tuple[Digit, ...]  # always 4 digits once parsed
Mode = Literal["local", "remote"]
SessionState = Literal["initializing", "awaiting_guess", "scored", "won", "aborted"]
EndReason = Literal["won", "aborted"]

CODE_LENGTH = 4
MIN_DIGIT = 1
MAX_DIGIT = 6
