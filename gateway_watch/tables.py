import typing as typ

import bs4 # type: ignore

from .errors import DocumentShapeError


Column = typ.List[str]
RowRecord = typ.Dict[str, str]

TABLE_SELECTOR = '#content > div:nth-child({position}) > table'


def extract_indexed_table(doc: bs4.BeautifulSoup, position: int) -> typ.List[Column]:
    """Read the table in the `position`th (1-based) child div of #content
    into columns of trimmed cell text. The first row sets the width."""
    table = doc.select_one(TABLE_SELECTOR.format(position=position))
    if table is None:
        raise DocumentShapeError(f'No table at #content > div:nth-child({position})')

    # html.parser does not synthesize <tbody> the way browsers do.
    body = table.find('tbody', recursive=False) or table
    rows = body('tr', recursive=False)
    if not rows:
        return []

    columns: typ.List[Column] = [[] for _ in cells(rows[0])]
    for ir, row in enumerate(rows):
        row_cells = cells(row)
        if len(row_cells) != len(columns):
            raise DocumentShapeError(
                f'Table at position {position}, row {ir}: '
                f'{len(row_cells)} cells, expected {len(columns)}')
        for column, cell in zip(columns, row_cells):
            column.append(cell.get_text().strip())
    return columns


def cells(tr: bs4.element.Tag) -> typ.List[bs4.element.Tag]:
    return tr.find_all(True, recursive=False)


def columns_to_rows(columns: typ.Sequence[Column]) -> typ.List[RowRecord]:
    """Pair each data column with the labels in column 0."""
    if not columns:
        return []

    labels = columns[0]
    if len(set(labels)) != len(labels):
        raise DocumentShapeError(f'Duplicate header labels: {labels}')

    out = []
    for i, column in enumerate(columns[1:], start=1):
        if len(column) != len(labels):
            raise DocumentShapeError(
                f'Column {i} has {len(column)} values for {len(labels)} labels')
        out.append(dict(zip(labels, column)))
    return out
