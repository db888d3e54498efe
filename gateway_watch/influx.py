import sys
import typing as typ
from dataclasses import dataclass
from time import time_ns


InfluxSet = typ.Mapping[str, typ.Any]


def _escape_key(s: str) -> str:
    return s.replace(',', '\\,').replace('=', '\\=').replace(' ', '\\ ')


@dataclass
class InfluxPoint:
    measurement: str
    tag_set: InfluxSet
    field_set: InfluxSet
    timestamp: int

    def linep(self) -> str:
        def strset(s: InfluxSet, val: typ.Callable[[typ.Any], str]) -> str:
            return ','.join(f'{_escape_key(k)}={val(v)}' for k, v in s.items())
        def tagval(v: typ.Any) -> str:
            return _escape_key(str(v))
        def fieldval(v: typ.Any) -> str:
            if type(v) is str:
                s = v.replace('\\', '\\\\').replace('"', '\\"')
                s = s.replace('\n', '\\n')
                return f'"{s}"'
            elif type(v) is bool:
                return 'true' if v else 'false'
            elif type(v) is int:
                return f'{v}i'
            else:
                return repr(float(v))

        head = _escape_key(self.measurement)
        if self.tag_set:
            head += ',' + strset(self.tag_set, tagval)
        return f'{head} {strset(self.field_set, fieldval)} {self.timestamp}'


class InfluxLineSink:
    """Writes each recorded event as one line of InfluxDB line protocol.

    The event's `channel` field doubles as the `index` tag.
    """

    def __init__(self, stream: typ.Optional[typ.TextIO] = None,
                 clock: typ.Callable[[], int] = time_ns) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.clock = clock

    def record(self, name: str, fields: InfluxSet) -> None:
        tags = {'index': fields['channel']} if 'channel' in fields else {}
        point = InfluxPoint(measurement=name, tag_set=tags,
                            field_set=fields, timestamp=self.clock())
        print(point.linep(), file=self.stream, flush=True)
