"""Text adapters: read numbers from streams, write them back out.

``read_big_integer`` consumes one whitespace-delimited token, the way a
stream extraction operator would.  Tokens are checked against the number
grammar by the pydantic token models; a bad token raises
``MalformedInputError`` and the stream stays positioned after it.

``write_number`` writes exactly ``str(value)``.
"""
from __future__ import annotations

from typing import Iterator, TextIO, Union

from bignum.biginteger import BigInteger
from bignum.exceptions import MalformedInputError
from bignum.logging_config import get_logger
from bignum.models import IntegerToken, RationalToken
from bignum.rational import Rational

logger = get_logger("textio")


def parse_big_integer(token: str) -> BigInteger:
    """Build a BigInteger from a decimal token such as ``"-120"``."""
    try:
        return IntegerToken.parse(token)
    except MalformedInputError as e:
        logger.debug("Rejected integer token %r: %s", token, e.reason)
        raise


def parse_rational(token: str) -> Rational:
    """Build a reduced Rational from ``"n"`` or ``"n/d"``."""
    try:
        return RationalToken.parse(token)
    except MalformedInputError as e:
        logger.debug("Rejected rational token %r: %s", token, e.reason)
        raise


def next_token(stream: TextIO) -> str | None:
    """Read the next whitespace-delimited token, or None at end of stream."""
    chars: list[str] = []
    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace():
            if chars:
                break
            continue
        chars.append(ch)
    return "".join(chars) if chars else None


def read_big_integer(stream: TextIO) -> BigInteger:
    """Read one integer token from ``stream``.

    Raises EOFError when only whitespace is left.
    """
    token = next_token(stream)
    if token is None:
        raise EOFError("no integer token left in stream")
    return parse_big_integer(token)


def read_rational(stream: TextIO) -> Rational:
    token = next_token(stream)
    if token is None:
        raise EOFError("no rational token left in stream")
    return parse_rational(token)


def iter_big_integers(stream: TextIO) -> Iterator[BigInteger]:
    """Yield every integer token until the stream is exhausted."""
    while True:
        token = next_token(stream)
        if token is None:
            return
        yield parse_big_integer(token)


def write_number(stream: TextIO, value: Union[BigInteger, Rational]) -> None:
    stream.write(str(value))
