"""Errors raised while building a puzzle from its 81-character text form."""

# errors.py
# All construction errors derive from ValueError so callers that only care
# about "bad input" can catch that. An unsolvable puzzle is not an error: it is
# reported as SolveOutcome.NO_SOLUTION.

from __future__ import annotations


class ConstructionError(ValueError):
    kind = "invalid_input"


class InvalidLength(ConstructionError):
    kind = "invalid_length"

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Invalid input length {length}, expected 81")


class InvalidCharacter(ConstructionError):
    kind = "invalid_character"

    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(f"Invalid input character {char!r} at position {position}")


class RuleViolation(ConstructionError):
    kind = "rule_violation"

    def __init__(self, position: int, digit: int):
        self.position = position
        self.digit = digit
        super().__init__(f"Digit {digit} at input position {position} violates the Sudoku condition")
