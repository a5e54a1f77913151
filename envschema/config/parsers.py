import re

from ..common import compat_typing as t
from ..common.duration import Duration
from .errors import ParseError

INTEGER_REGEX = re.compile(r'^[+-]?[0-9]+$')
NUMBER_REGEX = re.compile(r'^[+-]?[0-9]+(\.[0-9]*)?$')
TRUE_REGEX = re.compile(r'^(true|yes|y|1)$', re.IGNORECASE)
FALSE_REGEX = re.compile(r'^(false|no|n|0)$', re.IGNORECASE)

Parser = t.Callable[[str, t.Optional[t.Sequence[str]]], t.Any]


def parse_string(value: str, values: t.Optional[t.Sequence[str]] = None) -> str:
    return value


def parse_boolean(value: str, values: t.Optional[t.Sequence[str]] = None) -> bool:
    if TRUE_REGEX.fullmatch(value):
        return True
    if FALSE_REGEX.fullmatch(value):
        return False
    raise ParseError('Cannot convert to a boolean')


def parse_integer(value: str, values: t.Optional[t.Sequence[str]] = None) -> int:
    if INTEGER_REGEX.fullmatch(value):
        return int(value, 10)
    raise ParseError('Cannot convert to an integer')


def parse_number(value: str, values: t.Optional[t.Sequence[str]] = None) -> float:
    if NUMBER_REGEX.fullmatch(value):
        return float(value)
    raise ParseError('Cannot convert to a number')


def parse_duration(value: str, values: t.Optional[t.Sequence[str]] = None) -> Duration:
    """Plain integers are milliseconds, anything else goes through the duration string parser"""
    if INTEGER_REGEX.fullmatch(value):
        return Duration(int(value, 10))
    return Duration.from_string(value)


def parse_enum(value: str, values: t.Optional[t.Sequence[str]] = None) -> str:
    if values is not None and value in values:
        return value
    raise ParseError('Value not found in enumeration values')


PARSERS: t.Dict[str, Parser] = {
    'string': parse_string,
    'boolean': parse_boolean,
    'integer': parse_integer,
    'number': parse_number,
    'duration': parse_duration,
    'enum': parse_enum,
}


def get_parser(type_name: str) -> Parser:
    """Get the parser of a declared type

    Raises:
        ParseError: unknown type
    """
    if not isinstance(type_name, str) or type_name not in PARSERS:
        raise ParseError('Invalid type')
    return PARSERS[type_name]
