from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ibytes.models.conversion import UsageError
from ibytes.services.units import parse_unit_code

USAGE = "usage: ibytes [UNIT] NUMBER"
MAX_TOKENS = 2


class LineSource(Protocol):
    def isatty(self) -> bool: ...

    def readline(self) -> str: ...


@dataclass(slots=True, frozen=True)
class Invocation:
    selector: str | None
    number: str | None


def read_piped_line(stream: LineSource | None) -> str | None:
    """Return the first line of *stream* when it is redirected and not blank.

    ``None`` means the number has to come from the positional arguments.
    """
    if stream is None or stream.isatty():
        return None
    line = stream.readline().rstrip("\r\n")
    return line or None


def _first_code(tokens: list[str]) -> int | None:
    for index, token in enumerate(tokens):
        if parse_unit_code(token) is not None:
            return index
    return None


def split_tokens(tokens: list[str], *, number_piped: bool = False) -> Invocation:
    """Assign positional tokens to the unit selector and the number.

    The first token that is a unit code wins; the remaining token is the number.
    With two tokens and no code, the first one is kept as an unrecognized
    selector so unit resolution falls back to auto-selection.
    """
    if len(tokens) > MAX_TOKENS:
        raise UsageError(f"expected at most {MAX_TOKENS} arguments, got {len(tokens)}")

    code_index = _first_code(tokens)

    if number_piped:
        selector = tokens[code_index] if code_index is not None else None
        return Invocation(selector=selector, number=None)

    if not tokens:
        raise UsageError("missing NUMBER")
    if len(tokens) == 1:
        return Invocation(selector=None, number=tokens[0])
    if code_index == 1:
        return Invocation(selector=tokens[1], number=tokens[0])
    return Invocation(selector=tokens[0], number=tokens[1])
