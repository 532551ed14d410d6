"""Pydantic models for number tokens and BigInteger/Rational fields.

Token models validate the textual grammar before a value is built:

    integer   '-'? digit+
    rational  '-'? digit+ ( '/' digit+ )?

The ``BigIntegerField`` and ``RationalField`` annotated types let other
pydantic models carry exact numbers.  They accept native ints, existing
values or token strings, and serialise to the canonical string form.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable

from pydantic import (
    BaseModel,
    Field,
    GetCoreSchemaHandler,
    GetJsonSchemaHandler,
    ValidationError,
    field_validator,
)
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from bignum.biginteger import BigInteger
from bignum.exceptions import MalformedInputError
from bignum.rational import Rational

INTEGER_PATTERN = r"^-?[0-9]+$"
RATIONAL_PATTERN = r"^-?[0-9]+(/[0-9]+)?$"


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    return errors[0]["msg"] if errors else str(exc)


# ---------------------------------------------------------------------------
# Token models
# ---------------------------------------------------------------------------

class IntegerToken(BaseModel):
    """A whitespace-free decimal integer token."""

    text: str = Field(
        ...,
        min_length=1,
        pattern=INTEGER_PATTERN,
        description="Optional '-' followed by decimal digits, e.g. '-42'",
    )

    def to_big_integer(self) -> BigInteger:
        return BigInteger(self.text)

    @classmethod
    def parse(cls, text: str) -> BigInteger:
        """Validate ``text`` and build the BigInteger it denotes."""
        try:
            token = cls(text=text)
        except ValidationError as e:
            raise MalformedInputError(text, _first_error(e)) from e
        return token.to_big_integer()


class RationalToken(BaseModel):
    """A fraction token such as '3', '-3/4' or '10/2'."""

    text: str = Field(
        ...,
        min_length=1,
        pattern=RATIONAL_PATTERN,
        description="Integer or 'numerator/denominator' with a positive denominator",
    )

    @field_validator("text")
    @classmethod
    def denominator_not_zero(cls, v: str) -> str:
        _, sep, denominator = v.partition("/")
        if sep and not denominator.strip("0"):
            raise ValueError("denominator must not be zero")
        return v

    def to_rational(self) -> Rational:
        return Rational(self.text)

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Validate ``text`` and build the reduced Rational it denotes."""
        try:
            token = cls(text=text)
        except ValidationError as e:
            raise MalformedInputError(text, _first_error(e)) from e
        return token.to_rational()


# ---------------------------------------------------------------------------
# Annotated field types
# ---------------------------------------------------------------------------

def _validate_big_integer(value: Any) -> BigInteger:
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, bool):
        raise ValueError("booleans are not accepted as integers")
    if isinstance(value, int):
        return BigInteger(value)
    if isinstance(value, str):
        return IntegerToken.parse(value.strip())
    raise ValueError(f"expected an integer or decimal string, got {type(value).__name__}")


def _validate_rational(value: Any) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, bool):
        raise ValueError("booleans are not accepted as numbers")
    if isinstance(value, (BigInteger, int)):
        return Rational(value)
    if isinstance(value, str):
        return RationalToken.parse(value.strip())
    raise ValueError(f"expected a rational or fraction string, got {type(value).__name__}")


class _NumberAnnotation:
    """Core-schema hook shared by the BigInteger and Rational field types."""

    validator: Callable[[Any], Any]
    pattern: str

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validator,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": cls.pattern}


class _BigIntegerAnnotation(_NumberAnnotation):
    validator = staticmethod(_validate_big_integer)
    pattern = INTEGER_PATTERN


class _RationalAnnotation(_NumberAnnotation):
    validator = staticmethod(_validate_rational)
    pattern = RATIONAL_PATTERN


BigIntegerField = Annotated[BigInteger, _BigIntegerAnnotation]
RationalField = Annotated[Rational, _RationalAnnotation]
