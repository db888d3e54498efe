import typing as typ


class ScrapeError(Exception):
    pass


class DocumentShapeError(ScrapeError):
    """The status page no longer has the layout we bind to positionally."""


class MeasurementError(ScrapeError):
    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw


class UnitMismatchError(MeasurementError):
    def __init__(self, raw: str, unit: str, expected: typ.Optional[str]) -> None:
        super().__init__(f'Unknown unit: {unit} (expected {expected or "none"}) in {raw!r}',
                         raw)
        self.unit = unit
        self.expected = expected


class TokenCountError(MeasurementError):
    def __init__(self, raw: str, tokens: typ.List[str]) -> None:
        super().__init__(f'Expected 1 or 2 tokens, got {len(tokens)}: {tokens}', raw)
        self.tokens = tokens


class MalformedValueError(MeasurementError):
    pass


class FieldParseError(ScrapeError):
    def __init__(self, event: str, label: str, raw: str, cause: MeasurementError) -> None:
        super().__init__(f'{event}: cannot parse {label!r} = {raw!r}: {cause}')
        self.event = event
        self.label = label
        self.raw = raw


class MissingIndexError(ScrapeError):
    def __init__(self, event: str, entry: typ.Mapping[str, str]) -> None:
        super().__init__(f'{event}: no Index in {dict(entry)}')
        self.event = event
        self.entry = entry


class LoginError(ScrapeError):
    pass


class ConfigError(Exception):
    pass
