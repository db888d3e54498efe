import typing as typ

import bs4 # type: ignore
import pytest


DOWNSTREAM_ROWS = [
    ['Index', '1', '2', '3'],
    ['Lock Status', 'Locked', 'Locked', 'Locked'],
    ['Frequency', '597 MHz', '603 MHz', '609 MHz'],
    ['SNR', '38.5 dB', 'NA', '37.9 dB'],
    ['Power Level', '1.2 dBmV', '0.8 dBmV', 'NA'],
    ['Modulation', 'QAM256', 'QAM256', 'OFDM'],
]

UPSTREAM_ROWS = [
    ['Index', '1', '2'],
    ['Lock Status', 'Locked', 'Locked'],
    ['Frequency', '17 MHz', '23 MHz'],
    ['Symbol Rate', '5120', '5120'],
    ['Power Level', '42.0 dBmV', '43.5 dBmV'],
    ['Modulation', 'QAM', 'QAM'],
    ['Channel Type', 'TDMA_AND_ATDMA', 'ATDMA'],
]

CODEWORD_ROWS = [
    ['Index', '1', '2', '3'],
    ['Unerrored Codewords', '2864553203', '2864553190', '40411111'],
    ['Correctable Codewords', '45', '12', '0'],
    ['Uncorrectable Codewords', '3', '0', '0'],
]


def table_html(rows: typ.Sequence[typ.Sequence[str]], tbody: bool = True) -> str:
    trs = ''.join(
        '<tr>' + f'<th>{row[0]}</th>' + ''.join(f'<td>\n  {c}\n</td>' for c in row[1:]) + '</tr>\n'
        for row in rows)
    if tbody:
        trs = f'<tbody>{trs}</tbody>'
    return f'<table class="data">{trs}</table>'


def page_html(tables: typ.Mapping[int, str], blocks: int = 16) -> str:
    """A status page with `blocks` divs under #content, holding `tables`
    at their 1-based positions."""
    divs = '\n'.join(f'<div class="module">{tables.get(i, "<h2>block</h2>")}</div>'
                     for i in range(1, blocks + 1))
    return (f'<html><head><title>Gateway</title></head><body>'
            f'<div id="header"><table><tr><td>nav</td></tr></table></div>'
            f'<div id="content">\n{divs}\n</div></body></html>')


def status_page(downstream=DOWNSTREAM_ROWS, upstream=UPSTREAM_ROWS,
                codewords=CODEWORD_ROWS) -> str:
    return page_html({13: table_html(downstream),
                      14: table_html(upstream),
                      15: table_html(codewords)})


def soup(html: str) -> bs4.BeautifulSoup:
    return bs4.BeautifulSoup(html, 'html.parser')


@pytest.fixture
def status_doc() -> bs4.BeautifulSoup:
    return soup(status_page())
