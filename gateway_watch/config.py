import logging
import os
import typing as typ
from dataclasses import dataclass

from .errors import ConfigError


@dataclass(frozen=True)
class TablePositions:
    """1-based child positions of the telemetry tables under #content.
    Firmware revisions move these around."""
    downstream: int = 13
    upstream: int = 14
    codewords: int = 15


@dataclass(frozen=True)
class Config:
    router_addr: str
    router_password: str
    router_username: str = 'admin'
    rate_secs: int = 120
    timeout_secs: float = 10.0
    tables: TablePositions = TablePositions()
    log_level: str = 'INFO'


def _required(environ: typ.Mapping[str, str], key: str) -> str:
    value = environ.get(key)
    if not value:
        raise ConfigError(f'{key} not set')
    return value


def _number(environ: typ.Mapping[str, str], key: str, default: str,
            convert: typ.Callable[[str], typ.Any]) -> typ.Any:
    raw = environ.get(key, default)
    try:
        value = convert(raw)
    except ValueError:
        raise ConfigError(f'{key} is not a number: {raw!r}') from None
    if value <= 0:
        raise ConfigError(f'{key} must be positive, got {raw!r}')
    return value


def _log_level(environ: typ.Mapping[str, str]) -> str:
    level = environ.get('LOG_LEVEL', 'INFO').upper()
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f'LOG_LEVEL is not a logging level: {level!r}')
    return level


def load_config(environ: typ.Mapping[str, str] = os.environ) -> Config:
    return Config(
        router_addr=_required(environ, 'ROUTER_ADDR').rstrip('/'),
        router_password=_required(environ, 'ROUTER_PASSWORD'),
        router_username=environ.get('ROUTER_USERNAME', 'admin'),
        rate_secs=_number(environ, 'SCRAPE_RATE_SECS', '120', int),
        timeout_secs=_number(environ, 'REQUEST_TIMEOUT_SECS', '10', float),
        tables=TablePositions(
            downstream=_number(environ, 'DOWNSTREAM_TABLE', '13', int),
            upstream=_number(environ, 'UPSTREAM_TABLE', '14', int),
            codewords=_number(environ, 'CODEWORDS_TABLE', '15', int),
        ),
        log_level=_log_level(environ),
    )
