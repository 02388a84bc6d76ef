"""
Header-Mapped Table Strategy
============================

The first and most reliable strategy: a real roster table with a header row.

1. Take each candidate table whose body has at least Config.MIN_TABLE_ROWS
   rows (smaller tables are page furniture: quick facts, schedules).
2. Classify its columns from the header (see columns.py), falling back to
   the positional layout when no name header is found.
3. Read each row by column index. When the name column holds something that
   is not a name (a position code, an empty photo cell), probe the row for a
   link with a name-shaped text instead.
4. Fields whose column failed validation are scanned for per row.

When a table's name column cannot be trusted at all, the table is handed to
the row scanner of the heuristic-scan strategy.
"""

import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from config.layouts import get_layout_config
from config.settings import Config
from scrapers.football.detectors import (
    element_text,
    is_coach_position,
    is_valid_player_name,
    parse_jersey_number,
    split_hometown_line,
)
from scrapers.football.models import PlayerRecord
from scrapers.football.strategies.base import (
    body_rows,
    cell_name,
    collect_records,
    find_candidate_tables,
    find_name_link,
    row_cells,
)
from scrapers.football.strategies.columns import ColumnMap, classify_columns, find_header_row
from scrapers.football.strategies.scan_table import scan_field, scan_rows

STRATEGY_NAME = 'header_table'


def read_row(row: Tag, column_map: ColumnMap) -> Optional[PlayerRecord]:
    """
    Read one body row using the validated column map.

    Returns:
        A raw PlayerRecord, or None when the row has fewer than three cells
        or no valid player name
    """
    cells = row_cells(row)
    if len(cells) < 3:
        return None

    def cell_at(field: str) -> Optional[Tag]:
        idx = column_map.index(field)
        if idx is None or idx >= len(cells):
            return None
        return cells[idx]

    def text_of(field: str) -> str:
        return element_text(cell_at(field))

    name, href = cell_name(cell_at('name'))
    if not is_valid_player_name(name):
        # Column contents contradict the header; look for the profile link
        name, href = find_name_link(row)
    if not name:
        return None

    used = set(column_map.columns.values())

    def value_of(field: str) -> str:
        if column_map.index(field) is not None:
            return text_of(field)
        idx, value = scan_field(cells, field, used)
        if idx is not None:
            used.add(idx)
        return value

    number = parse_jersey_number(value_of('number'))
    position = value_of('position')
    if is_coach_position(position):
        return None

    year = value_of('year')
    height = value_of('height')
    weight = value_of('weight')

    hometown = text_of('hometown')
    high_school = text_of('high_school')
    previous_school = text_of('previous_school')
    if column_map.index('high_school') is None:
        hometown, split_school = split_hometown_line(hometown)
        high_school = split_school

    return PlayerRecord(
        name=name,
        number=number,
        position=position,
        year=year,
        height=height,
        weight=weight,
        hometown=hometown,
        high_school=high_school,
        previous_school=previous_school,
        url=href,
    )


def read_table(table: Tag) -> List[PlayerRecord]:
    """Extract every player row from one qualifying table."""
    header = find_header_row(table)
    rows = body_rows(table, header)

    staff_row = re.compile(get_layout_config('tables')['staff_row_pattern'], re.IGNORECASE)
    rows = [row for row in rows if not staff_row.search(' '.join(row.get('class') or []))]

    column_map = classify_columns(header, rows)
    if column_map is None:
        logger.debug(f"{STRATEGY_NAME}: columns not trustworthy, scanning rows instead")
        return scan_rows(rows, STRATEGY_NAME)

    logger.debug(
        f"{STRATEGY_NAME}: {column_map.source} column map "
        f"{dict(sorted(column_map.columns.items(), key=lambda item: item[1]))}"
    )
    return collect_records(rows, lambda row: read_row(row, column_map), STRATEGY_NAME)


def extract_header_mapped_table(soup: BeautifulSoup) -> List[PlayerRecord]:
    """
    Strategy 1: read roster tables by their header row.

    Records from every qualifying table are kept, so rosters split into
    offense / defense / specialists tables come out whole.
    """
    records: List[PlayerRecord] = []

    for table in find_candidate_tables(soup):
        rows = body_rows(table, find_header_row(table))
        if len(rows) < Config.MIN_TABLE_ROWS:
            continue
        records.extend(read_table(table))

    return records
