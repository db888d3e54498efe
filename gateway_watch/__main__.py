import logging
import sys
import typing as typ
from time import sleep

import bs4 # type: ignore
import requests

from .config import Config, TablePositions, load_config
from .errors import ConfigError, LoginError, ScrapeError
from .gateway import Gateway
from .influx import InfluxLineSink
from .reporters import MetricEvent, codeword_events, downstream_events, upstream_events
from .tables import columns_to_rows, extract_indexed_table


logger = logging.getLogger('gateway_watch')


class Sink(typ.Protocol):
    def record(self, name: str, fields: typ.Mapping[str, typ.Any]) -> None: ...


def main() -> None:
    try:
        config = load_config()
    except ConfigError as e:
        sys.exit(str(e))
    logging.basicConfig(level=config.log_level,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
                        stream=sys.stderr)

    gateway = Gateway(config.router_addr, config.router_username,
                      config.router_password, timeout=config.timeout_secs)
    sink = InfluxLineSink()
    try:
        gateway.login()
        run(gateway, sink, config)
    except LoginError:
        logger.exception('Giving up')
        sys.exit(1)
    finally:
        gateway.close()


def run(gateway: Gateway, sink: Sink, config: Config) -> None:
    while True:
        try:
            poll_once(gateway, sink, config.tables)
        except LoginError:
            raise
        except (ScrapeError, requests.RequestException):
            logger.exception('Poll cycle failed')
        sleep(config.rate_secs)


def poll_once(gateway: Gateway, sink: Sink,
              positions: TablePositions = TablePositions()) -> int:
    doc = gateway.fetch_status()
    if doc is None:
        return 0

    events = scrape(doc, positions)
    for event in events:
        logger.debug('%s %s', event.name, event.fields)
        sink.record(event.name, event.fields)
    logger.info('Reported %d events', len(events))
    return len(events)


def scrape(doc: bs4.BeautifulSoup, positions: TablePositions = TablePositions()) \
        -> typ.List[MetricEvent]:
    """All events of one status page; nothing is returned if any table fails."""
    def rows(position: int) -> typ.List[typ.Dict[str, str]]:
        return columns_to_rows(extract_indexed_table(doc, position))

    events: typ.List[MetricEvent] = []
    events.extend(downstream_events(rows(positions.downstream)))
    events.extend(upstream_events(rows(positions.upstream)))
    events.extend(codeword_events(rows(positions.codewords)))
    return events


if __name__ == '__main__':
    main()
