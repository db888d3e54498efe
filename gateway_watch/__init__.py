from .errors import (ConfigError, DocumentShapeError, FieldParseError, LoginError,
                     MalformedValueError, MeasurementError, MissingIndexError,
                     ScrapeError, TokenCountError, UnitMismatchError)
from .reporters import MetricEvent
from .units import UNAVAILABLE, Kind, parse_measurement

__all__ = [
    'ConfigError', 'DocumentShapeError', 'FieldParseError', 'LoginError',
    'MalformedValueError', 'MeasurementError', 'MissingIndexError', 'ScrapeError',
    'TokenCountError', 'UnitMismatchError', 'MetricEvent', 'UNAVAILABLE', 'Kind',
    'parse_measurement',
]
