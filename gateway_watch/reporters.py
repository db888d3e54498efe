import typing as typ
from dataclasses import dataclass, field

from .errors import FieldParseError, MeasurementError, MissingIndexError
from .tables import RowRecord
from .units import UNAVAILABLE, Kind, parse_measurement


FieldValue = typ.Union[str, int, float]
FieldSet = typ.Dict[str, FieldValue]

INDEX_LABEL = 'Index'


@dataclass(frozen=True)
class MetricEvent:
    name: str
    fields: FieldSet = field(default_factory=dict)


@dataclass(frozen=True)
class FieldSpec:
    label: str
    key: str
    kind: typ.Optional[Kind] = None  # None passes the text through


@dataclass(frozen=True)
class EventSpec:
    name: str
    fields: typ.Sequence[FieldSpec]


DOWNSTREAM = EventSpec('downstream_channels', (
    FieldSpec('Modulation', 'modulation'),
    FieldSpec('Lock Status', 'lock_status'),
    FieldSpec('Frequency', 'frequency', Kind.FREQUENCY),
    FieldSpec('SNR', 'snr', Kind.SNR),
    FieldSpec('Power Level', 'power_level', Kind.POWER_LEVEL),
))

UPSTREAM = EventSpec('upstream_channels', (
    FieldSpec('Modulation', 'modulation'),
    FieldSpec('Lock Status', 'lock_status'),
    FieldSpec('Channel Type', 'channel_type'),
    FieldSpec('Frequency', 'frequency', Kind.FREQUENCY),
    FieldSpec('Symbol Rate', 'symbol_rate', Kind.INTEGER),
    FieldSpec('Power Level', 'power_level', Kind.POWER_LEVEL),
))

CODEWORDS = EventSpec('cm_codewords', (
    FieldSpec('Unerrored Codewords', 'unerrored_codewords', Kind.INTEGER),
    FieldSpec('Correctable Codewords', 'correctable_codewords', Kind.INTEGER),
    FieldSpec('Uncorrectable Codewords', 'uncorrectable_codewords', Kind.INTEGER),
))


def extract_fields(event: str, entry: RowRecord,
                   specs: typ.Iterable[FieldSpec]) -> FieldSet:
    """Read the typed fields of one row.

    Labels missing from the row and readings the device marks 'NA' are
    left out of the result. Anything else that fails to parse raises
    FieldParseError.
    """
    fields: FieldSet = {}
    for spec in specs:
        if spec.label not in entry:
            continue
        raw = entry[spec.label]
        if spec.kind is None:
            fields[spec.key] = raw
            continue
        try:
            value = parse_measurement(raw, spec.kind)
        except MeasurementError as e:
            raise FieldParseError(event, spec.label, raw, e) from e
        if value is not UNAVAILABLE:
            fields[spec.key] = typ.cast(FieldValue, value)
    return fields


def entry_events(entries: typ.Iterable[RowRecord], spec: EventSpec) \
        -> typ.Generator[MetricEvent, None, None]:
    for entry in entries:
        if INDEX_LABEL not in entry:
            raise MissingIndexError(spec.name, entry)
        fields: FieldSet = {'channel': entry[INDEX_LABEL]}
        fields.update(extract_fields(spec.name, entry, spec.fields))
        yield MetricEvent(spec.name, fields)


def downstream_events(entries: typ.Iterable[RowRecord]) \
        -> typ.Generator[MetricEvent, None, None]:
    return entry_events(entries, DOWNSTREAM)


def upstream_events(entries: typ.Iterable[RowRecord]) \
        -> typ.Generator[MetricEvent, None, None]:
    return entry_events(entries, UPSTREAM)


def codeword_events(entries: typ.Iterable[RowRecord]) \
        -> typ.Generator[MetricEvent, None, None]:
    return entry_events(entries, CODEWORDS)
