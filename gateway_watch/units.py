"""Parsing of the gateway's measurement strings, e.g. '603 MHz' or '38.5 dB'."""

import enum
import math
import re
import typing as typ
from decimal import ROUND_DOWN, Decimal, DecimalException

from .errors import MalformedValueError, TokenCountError, UnitMismatchError


NA = 'NA'
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r'[+-]?[0-9]+')
_FLOAT_RE = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


class _Unavailable:
    """Reading the device reports as 'NA'. Not an error."""

    _instance = None

    def __new__(cls) -> '_Unavailable':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNAVAILABLE'

    def __bool__(self) -> bool:
        return False


UNAVAILABLE = _Unavailable()

Number = typ.Union[int, float]
Measurement = typ.Union[int, float, _Unavailable]


class Kind(enum.Enum):
    FREQUENCY = 'frequency'
    SNR = 'snr'
    POWER_LEVEL = 'power_level'
    INTEGER = 'integer'


def _to_int(token: str, raw: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise MalformedValueError(f'Not an integer: {token!r}', raw)
    return _int64(int(token), token, raw)


def _int64(value: typ.Union[int, Decimal], token: str, raw: str) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise MalformedValueError(f'Integer out of 64-bit range: {token}', raw)
    return int(value)


def _to_float(token: str, raw: str) -> float:
    if not _FLOAT_RE.fullmatch(token):
        raise MalformedValueError(f'Not a number: {token!r}', raw)
    value = float(token)
    if not math.isfinite(value):
        raise MalformedValueError(f'Number out of range: {token}', raw)
    return value


def _mhz_to_hz(token: str, raw: str) -> int:
    if not _FLOAT_RE.fullmatch(token):
        raise MalformedValueError(f'Not a number: {token!r}', raw)
    try:
        hz = (Decimal(token) * 1000 * 1000).to_integral_value(rounding=ROUND_DOWN)
    except DecimalException:
        raise MalformedValueError(f'Number out of range: {token}', raw) from None
    return _int64(hz, token, raw)


class _Rule(typ.NamedTuple):
    unit: typ.Optional[str]
    bare: typ.Callable[[str, str], Number]
    scaled: typ.Callable[[str, str], Number]
    allows_na: bool


_RULES: typ.Dict[Kind, _Rule] = {
    Kind.FREQUENCY: _Rule('MHz', _to_int, _mhz_to_hz, allows_na=False),
    Kind.SNR: _Rule('dB', _to_float, _to_float, allows_na=True),
    Kind.POWER_LEVEL: _Rule('dBmV', _to_float, _to_float, allows_na=True),
    Kind.INTEGER: _Rule(None, _to_int, _to_int, allows_na=False),
}


def parse_measurement(raw: str, kind: Kind) -> Measurement:
    """Parse `raw` as a measurement of the given kind.

    One token is a bare number. Two tokens are a number followed by the
    unit of `kind`, converted to the base unit (hertz for frequencies).
    Returns UNAVAILABLE for 'NA' where the kind allows it; raises a
    MeasurementError for anything else that does not parse.
    """
    rule = _RULES[kind]
    if rule.allows_na and raw == NA:
        return UNAVAILABLE

    parts = raw.split()
    if len(parts) == 1:
        return rule.bare(parts[0], raw)
    elif len(parts) == 2:
        if parts[1] != rule.unit:
            raise UnitMismatchError(raw, parts[1], rule.unit)
        return rule.scaled(parts[0], raw)
    else:
        raise TokenCountError(raw, parts)


def parse_frequency(raw: str) -> int:
    return typ.cast(int, parse_measurement(raw, Kind.FREQUENCY))


def parse_snr(raw: str) -> typ.Union[float, _Unavailable]:
    return typ.cast(typ.Union[float, _Unavailable], parse_measurement(raw, Kind.SNR))


def parse_power_level(raw: str) -> typ.Union[float, _Unavailable]:
    return typ.cast(typ.Union[float, _Unavailable], parse_measurement(raw, Kind.POWER_LEVEL))


def parse_int(raw: str) -> int:
    return typ.cast(int, parse_measurement(raw, Kind.INTEGER))
