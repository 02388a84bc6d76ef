"""
Shared plumbing for the extraction strategies: per-entry error isolation,
cell access and link lookup.
"""

from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from bs4 import BeautifulSoup, Tag
from loguru import logger

from config.layouts import get_layout_config
from scrapers.exceptions import PartialRecordSkipped
from scrapers.football.detectors import element_text, is_in_staff_section, is_valid_player_name
from scrapers.football.models import PlayerRecord

T = TypeVar('T')

# A strategy reads a parsed document and returns raw (un-normalized) records
StrategyFn = Callable[[BeautifulSoup], List[PlayerRecord]]


def collect_records(
    items: Iterable[T],
    parse_item: Callable[[T], Optional[PlayerRecord]],
    strategy: str
) -> List[PlayerRecord]:
    """
    Run parse_item over every row/card and keep the records it returns.

    parse_item returns None for entries that simply are not players. If it
    raises, that one entry is skipped and logged; the rest of the roster
    still gets extracted.
    """
    log = logger.bind(strategy=strategy)
    records: List[PlayerRecord] = []
    skipped: List[PartialRecordSkipped] = []

    for index, item in enumerate(items):
        try:
            record = parse_item(item)
        except Exception as e:
            skip = PartialRecordSkipped(strategy, index, e)
            log.warning(skip.message)
            skipped.append(skip)
            continue

        if record is not None:
            records.append(record)

    if skipped:
        log.warning(f"{strategy}: skipped {len(skipped)} malformed entries, kept {len(records)}")

    return records


def row_cells(row: Tag) -> List[Tag]:
    """The td/th cells that belong directly to a table row."""
    return row.find_all(['td', 'th'], recursive=False)


def link_href(link: Optional[Tag]) -> str:
    """href of a link, ignoring in-page anchors and javascript: targets."""
    if link is None:
        return ''
    href = (link.get('href') or '').strip()
    if not href or href.startswith('#') or href.lower().startswith('javascript:'):
        return ''
    return href


def cell_name(cell: Optional[Tag]) -> Tuple[str, str]:
    """
    Name candidate held by a single cell.

    Prefers the text of the first link in the cell (the profile link) and
    falls back to the cell text.

    Returns:
        (name, href)
    """
    if cell is None:
        return '', ''

    for link in cell.find_all('a', href=True):
        text = element_text(link)
        if text:
            return text, link_href(link)

    return element_text(cell), ''


def find_name_link(row: Tag) -> Tuple[str, str]:
    """
    Probe a row for a hyperlink whose text is a valid player name.

    Selectors are tried most-specific first (see config/layouts.py).

    Returns:
        (name, href), or ('', '') when the row has no such link
    """
    layout = get_layout_config('tables')

    for selector in layout['name_link_selectors']:
        for link in row.select(selector):
            candidate = element_text(link)
            if is_valid_player_name(candidate):
                return candidate, link_href(link)

    for link in row.find_all('a', href=True):
        candidate = element_text(link)
        if is_valid_player_name(candidate):
            return candidate, link_href(link)

    return '', ''


def find_candidate_tables(soup: BeautifulSoup) -> List[Tag]:
    """
    All tables that could hold a roster, roster-marked tables first.

    Tables inside a staff/coach section are left out.
    """
    layout = get_layout_config('tables')
    ordered: List[Tag] = []
    seen = set()

    def add(table: Tag):
        if id(table) not in seen:
            seen.add(id(table))
            ordered.append(table)

    for selector in layout['preferred_selectors']:
        for table in soup.select(selector):
            if table.name == 'table':
                add(table)

    for table in soup.find_all('table'):
        add(table)

    return [table for table in ordered if not is_in_staff_section(table)]


def body_rows(table: Tag, header: Optional[Tag] = None) -> List[Tag]:
    """
    Data rows that belong to this table (not to a nested table), skipping
    thead/tfoot rows, the detected header row and rows without td cells.
    """
    rows = []
    for tr in table.find_all('tr'):
        if tr is header or tr.find_parent('table') is not table:
            continue
        if tr.parent is not None and tr.parent.name in ('thead', 'tfoot'):
            continue
        if not any(cell.name == 'td' for cell in row_cells(tr)):
            continue
        rows.append(tr)
    return rows
