"""
Host JSON primitives for jsontidy.

The core never tokenizes JSON itself. It relies on a parse primitive and a
serialize primitive; this module adapts Python's ``json`` module to that
shape so that parse failures always arrive as :class:`ParseFailure` with an
explicit offset, and adds the monotonic clock used for timings.
"""

import json
import math
import time
import uuid
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import regex

from ..security.exceptions import ParseFailure, SerializationFault


class ParsePrimitive(Protocol):
    """Anything that can parse and serialize JSON the way jsontidy expects."""

    def parse(self, text: str) -> Any:
        ...

    def serialize(self, value: Any, indent: Optional[str] = None) -> str:
        ...


@dataclass(frozen=True)
class NumberLiteral:
    """A JSON number kept as its source text.

    Holds literals Python cannot represent as ``int`` or ``float``: integers
    longer than the interpreter's digit limit and floats that overflow to
    infinity. They are written back out exactly as they were read.
    """

    literal: str


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are accepted by the json module but not by RFC 8259
    raise ParseFailure(f"Unexpected token {name} is not valid JSON")


def _parse_int(literal: str) -> Any:
    try:
        return int(literal)
    except ValueError:
        return NumberLiteral(literal)


def _parse_float(literal: str) -> Any:
    value = float(literal)
    if math.isinf(value):
        return NumberLiteral(literal)
    return value


class _LiteralEncoder(json.JSONEncoder):
    """Encodes each NumberLiteral as a unique placeholder string."""

    def __init__(self, *args: Any, token: str, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.token = token
        self.literals: list[str] = []

    def default(self, o: Any) -> Any:
        if isinstance(o, NumberLiteral):
            self.literals.append(o.literal)
            return f"{self.token}:{len(self.literals) - 1}"
        return super().default(o)


class JsonPrimitives:
    """RFC 8259 parse/serialize built on the standard ``json`` module."""

    def parse(self, text: str) -> Any:
        """Parse ``text`` or raise :class:`ParseFailure`."""
        try:
            return json.loads(
                text,
                parse_int=_parse_int,
                parse_float=_parse_float,
                parse_constant=_reject_constant,
            )
        except json.JSONDecodeError as e:
            raise ParseFailure(e.msg, position=e.pos) from e

    def serialize(self, value: Any, indent: Optional[str] = None) -> str:
        """Serialize ``value``; compact when ``indent`` is None or empty."""
        encoder = _LiteralEncoder(
            token=uuid.uuid4().hex,
            indent=indent or None,
            separators=None if indent else (",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
        try:
            output = encoder.encode(value)
        except (TypeError, ValueError) as e:
            raise SerializationFault(f"Serialization failed: {e}") from e

        if not encoder.literals:
            return output
        placeholder = regex.compile(rf'"{encoder.token}:(\d+)"')
        return placeholder.sub(
            lambda match: encoder.literals[int(match.group(1))], output
        )


def monotonic_micros() -> float:
    """Monotonic clock reading in microseconds."""
    return time.perf_counter_ns() / 1000.0


class Stopwatch:
    """Context manager measuring elapsed monotonic time in microseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self.elapsed_micros = 0.0

    def __enter__(self) -> "Stopwatch":
        self._start = monotonic_micros()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.elapsed_micros = monotonic_micros() - self._start
