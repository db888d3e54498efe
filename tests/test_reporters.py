import pytest

from gateway_watch.errors import FieldParseError, MissingIndexError, UnitMismatchError
from gateway_watch.reporters import (MetricEvent, codeword_events, downstream_events,
                                     upstream_events)


def test_downstream_event():
    entry = {'Index': '3', 'Frequency': '603 MHz', 'SNR': 'NA',
             'Modulation': 'QAM256', 'Lock Status': 'Locked'}

    events = list(downstream_events([entry]))

    assert events == [MetricEvent('downstream_channels', {
        'channel': '3',
        'frequency': 603000000,
        'modulation': 'QAM256',
        'lock_status': 'Locked',
    })]
    assert 'snr' not in events[0].fields


def test_downstream_power_level():
    [event] = downstream_events([{'Index': '1', 'SNR': '38.5 dB', 'Power Level': '1.2 dBmV'}])
    assert event.fields == {'channel': '1', 'snr': 38.5, 'power_level': 1.2}


def test_absent_fields_are_omitted():
    [event] = downstream_events([{'Index': '7'}])
    assert event.fields == {'channel': '7'}


def test_upstream_event():
    entry = {'Index': '2', 'Lock Status': 'Locked', 'Frequency': '23 MHz',
             'Symbol Rate': '5120', 'Power Level': 'NA', 'Modulation': 'QAM',
             'Channel Type': 'ATDMA'}

    [event] = upstream_events([entry])

    assert event.name == 'upstream_channels'
    assert event.fields == {'channel': '2', 'lock_status': 'Locked', 'frequency': 23000000,
                            'symbol_rate': 5120, 'modulation': 'QAM',
                            'channel_type': 'ATDMA'}


def test_upstream_ignores_snr():
    [event] = upstream_events([{'Index': '1', 'SNR': 'garbage'}])
    assert event.fields == {'channel': '1'}


def test_codeword_events():
    entries = [
        {'Index': '1', 'Unerrored Codewords': '2864553203',
         'Correctable Codewords': '45', 'Uncorrectable Codewords': '3'},
        {'Index': '2', 'Unerrored Codewords': '10',
         'Correctable Codewords': '0', 'Uncorrectable Codewords': '0'},
    ]

    events = list(codeword_events(entries))

    assert [e.name for e in events] == ['cm_codewords', 'cm_codewords']
    assert events[0].fields == {'channel': '1', 'unerrored_codewords': 2864553203,
                                'correctable_codewords': 45, 'uncorrectable_codewords': 3}
    assert events[1].fields['channel'] == '2'


def test_codeword_na_is_fatal():
    with pytest.raises(FieldParseError) as exc_info:
        list(codeword_events([{'Index': '1', 'Correctable Codewords': 'NA'}]))
    assert exc_info.value.label == 'Correctable Codewords'
    assert exc_info.value.event == 'cm_codewords'


def test_parse_failure_carries_context():
    with pytest.raises(FieldParseError) as exc_info:
        list(downstream_events([{'Index': '1', 'Frequency': '5 Hz'}]))

    err = exc_info.value
    assert err.event == 'downstream_channels'
    assert err.label == 'Frequency'
    assert err.raw == '5 Hz'
    assert isinstance(err.__cause__, UnitMismatchError)
    assert err.__cause__.unit == 'Hz'


def test_missing_index_stops_at_that_row():
    entries = [{'Index': '1', 'Modulation': 'QAM256'}, {'Modulation': 'QAM256'},
               {'Index': '3'}]
    emitted = []

    with pytest.raises(MissingIndexError) as exc_info:
        for event in downstream_events(entries):
            emitted.append(event)

    assert [e.fields['channel'] for e in emitted] == ['1']
    assert exc_info.value.event == 'downstream_channels'
