"""
Heuristic-Scan Table Strategy
=============================

Reads roster tables without trusting their columns. Every row is scanned
cell by cell and each field is taken from the first cell its detector
accepts: the first name-shaped link (or cell) for the name, the first 1-2
digit cell for the number, the first position code for the position, and
so on. Cells claimed by one field are not offered to the next. Whatever is
left over, in page order, becomes hometown, high school and previous school.

A row only counts as a player when it has a valid name plus a jersey number
or a position; that keeps schedule and stats tables out of the roster.
"""

import re
from typing import Callable, Dict, List, Optional, Set, Tuple

from bs4 import BeautifulSoup, Tag

from config.layouts import get_layout_config
from scrapers.football.detectors import (
    NAME_EXCLUDE_PATTERN,
    element_text,
    find_height,
    find_weight,
    find_year,
    is_coach_position,
    is_valid_player_name,
    looks_like_hometown,
    match_number_cell,
    match_position_cell,
    parse_jersey_number,
    split_hometown_line,
)
from scrapers.football.models import PlayerRecord
from scrapers.football.strategies.base import (
    body_rows,
    collect_records,
    find_candidate_tables,
    link_href,
    row_cells,
)

STRATEGY_NAME = 'scan_table'

# Scan order matters: a cell taken by an earlier field is not seen by later ones
FIELD_FINDERS: Dict[str, Callable[[str], str]] = {
    'number': lambda text: text if match_number_cell(text) else '',
    'position': match_position_cell,
    'year': find_year,
    'height': find_height,
    'weight': find_weight,
}


def scan_field(cells: List[Tag], field: str, used: Set[int]) -> Tuple[Optional[int], str]:
    """
    Find the first unused cell holding a value for `field`.

    Returns:
        (cell index, value) or (None, '') when no cell matches
    """
    finder = FIELD_FINDERS[field]
    for idx, cell in enumerate(cells):
        if idx in used:
            continue
        value = finder(element_text(cell))
        if value:
            return idx, value
    return None, ''


def scan_name(cells: List[Tag]) -> Tuple[Optional[int], str, str]:
    """
    Find the player's name in a row: name-shaped link text first, then
    name-shaped cell text that is not a "City, ST" hometown.

    Returns:
        (cell index, name, href) or (None, '', '')
    """
    for idx, cell in enumerate(cells):
        for link in cell.find_all('a', href=True):
            candidate = element_text(link)
            if is_valid_player_name(candidate):
                return idx, candidate, link_href(link)

    for idx, cell in enumerate(cells):
        candidate = element_text(cell)
        if is_valid_player_name(candidate) and not looks_like_hometown(candidate):
            return idx, candidate, ''

    return None, '', ''


def leftover_details(cells: List[Tag], used: Set[int]) -> Tuple[str, str, str]:
    """
    Assign unclaimed cell texts, in order, to hometown, high school and
    previous school. A "City, ST / School" hometown is split in two.
    """
    extras = []
    for idx, cell in enumerate(cells):
        if idx in used:
            continue
        text = element_text(cell)
        if text and not NAME_EXCLUDE_PATTERN.search(text):
            extras.append(text)

    if not extras:
        return '', '', ''

    hometown, school = split_hometown_line(extras[0])
    rest = extras[1:]
    if school:
        rest = [school] + rest

    high_school = rest[0] if rest else ''
    previous_school = rest[1] if len(rest) > 1 else ''
    return hometown, high_school, previous_school


def scan_row(row: Tag) -> Optional[PlayerRecord]:
    """Turn one table row into a record by scanning all of its cells."""
    cells = row_cells(row)
    if len(cells) < 3:
        return None

    name_idx, name, href = scan_name(cells)
    if name_idx is None:
        return None

    used = {name_idx}
    values: Dict[str, str] = {}
    for field in FIELD_FINDERS:
        idx, value = scan_field(cells, field, used)
        if idx is not None:
            used.add(idx)
            values[field] = value

    if not values.get('number') and not values.get('position'):
        return None

    if any(is_coach_position(element_text(cell)) for idx, cell in enumerate(cells) if idx not in used):
        return None

    hometown, high_school, previous_school = leftover_details(cells, used)

    return PlayerRecord(
        name=name,
        number=parse_jersey_number(values.get('number', '')),
        position=values.get('position', ''),
        year=values.get('year', ''),
        height=values.get('height', ''),
        weight=values.get('weight', ''),
        hometown=hometown,
        high_school=high_school,
        previous_school=previous_school,
        url=href,
    )


def scan_rows(rows: List[Tag], strategy: str = STRATEGY_NAME) -> List[PlayerRecord]:
    """Scan a list of rows, skipping staff rows."""
    staff_row = re.compile(get_layout_config('tables')['staff_row_pattern'], re.IGNORECASE)
    rows = [row for row in rows if not staff_row.search(' '.join(row.get('class') or []))]
    return collect_records(rows, scan_row, strategy)


def extract_scanned_tables(soup: BeautifulSoup) -> List[PlayerRecord]:
    """
    Strategy 2: scan every row of every candidate table.

    Unlike the header-mapped strategy there is no minimum table size; the
    per-row requirements decide what is a player.
    """
    records: List[PlayerRecord] = []
    for table in find_candidate_tables(soup):
        records.extend(scan_rows(body_rows(table)))
    return records
