"""
Column Classifier
=================

Works out which table column holds which roster field, in two passes.

Pass 1 trusts the header row: each header cell is matched against the
synonym table in config/layouts.py. A table without a recognizable name
header is assumed to use the common positional layout
(number, name, position, year, height, weight, hometown, high school,
previous school).

Pass 2 checks that assumption against the data. A sample of body rows is
run through the detector for each assigned field (a "number" column should
hold 1-2 digit values, a "position" column position codes, and so on). A
column whose sampled values do not match often enough is dropped from the
map, and the row reader scans the row for that field instead. When the name
column itself fails, the map is rejected and the whole table is read by the
row scanner.

For Junior Developers:
---------------------
Headers lie more often than you would think: sites hide columns on mobile,
add unlabeled photo columns, or put the jersey number and the name in one
cell. Validating against the data catches those cases without a special
case per site.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional

from bs4 import Tag
from loguru import logger

from config.layouts import HEADER_SYNONYMS, POSITIONAL_COLUMNS
from config.settings import Config
from scrapers.football.detectors import (
    element_text,
    find_height,
    find_weight,
    find_year,
    is_valid_player_name,
    match_number_cell,
    match_position_cell,
)
from scrapers.football.strategies.base import cell_name, row_cells


HEADER = 'header'
POSITIONAL = 'positional'

# Detector each field's sampled cells must satisfy. Free-text fields
# (hometown, schools) have no detector and are always trusted.
FIELD_VALIDATORS: Dict[str, Callable[[Tag], bool]] = {
    'number': lambda cell: match_number_cell(element_text(cell)),
    'name': lambda cell: is_valid_player_name(cell_name(cell)[0]),
    'position': lambda cell: bool(match_position_cell(element_text(cell))),
    'year': lambda cell: bool(find_year(element_text(cell))),
    'height': lambda cell: bool(find_height(element_text(cell))),
    'weight': lambda cell: bool(find_weight(element_text(cell))),
}


@dataclass(frozen=True)
class ColumnMap:
    """Validated field -> column index assignments for one table."""
    columns: Mapping[str, int]
    source: str = HEADER

    def index(self, field: str) -> Optional[int]:
        return self.columns.get(field)


def normalize_header(text: str) -> str:
    """Lowercase, collapse whitespace and drop a trailing colon."""
    return ' '.join(text.lower().split()).rstrip(':').strip()


def map_header(header: Optional[Tag]) -> Dict[str, int]:
    """
    Pass 1: assign fields to columns from header cell text.

    Exact synonym matches win; remaining columns are then matched when a
    synonym of four or more characters appears inside the header text
    (e.g. "Hometown / Last School" -> hometown).
    """
    if header is None:
        return {}

    labels = [normalize_header(element_text(cell)) for cell in row_cells(header)]
    mapping: Dict[str, int] = {}

    for idx, label in enumerate(labels):
        for field, synonyms in HEADER_SYNONYMS.items():
            if field not in mapping and label in synonyms:
                mapping[field] = idx
                break

    used = set(mapping.values())
    for idx, label in enumerate(labels):
        if idx in used or not label:
            continue
        for field, synonyms in HEADER_SYNONYMS.items():
            if field in mapping:
                continue
            if any(len(synonym) >= 4 and synonym in label for synonym in synonyms):
                mapping[field] = idx
                used.add(idx)
                break

    return mapping


def find_header_row(table: Tag) -> Optional[Tag]:
    """
    Locate the header row of a table.

    Checks the last row of <thead>, then the first row of the table when it
    is made only of <th> cells or its cells name at least two known fields.
    """
    thead = table.find('thead')
    if thead is not None and thead.find_parent('table') is table:
        rows = [tr for tr in thead.find_all('tr') if row_cells(tr)]
        if rows:
            return rows[-1]

    for tr in table.find_all('tr'):
        if tr.find_parent('table') is not table:
            continue
        cells = row_cells(tr)
        if cells and all(cell.name == 'th' for cell in cells):
            return tr
        labels = map_header(tr)
        if len(labels) >= 2 and 'name' in labels:
            return tr
        break

    return None


def _column_ratio(field: str, idx: int, sample: List[List[Tag]]) -> Optional[float]:
    """Share of non-empty sampled cells in column idx that pass the field's detector."""
    validator = FIELD_VALIDATORS[field]
    cells = [cells[idx] for cells in sample if idx < len(cells) and element_text(cells[idx])]
    if not cells:
        return None
    return sum(1 for cell in cells if validator(cell)) / len(cells)


def classify_columns(header: Optional[Tag], rows: List[Tag]) -> Optional[ColumnMap]:
    """
    Build and validate the column map for a table.

    Args:
        header: The header row, or None when the table has none
        rows: The table's body rows

    Returns:
        A ColumnMap holding only the columns that passed validation, or
        None when the table's name column cannot be trusted
    """
    mapping = map_header(header)
    source = HEADER
    if 'name' not in mapping:
        mapping = {field: idx for idx, field in enumerate(POSITIONAL_COLUMNS)}
        source = POSITIONAL

    sample = [cells for cells in (row_cells(row) for row in rows) if len(cells) >= 3]
    sample = sample[:Config.COLUMN_SAMPLE_SIZE]
    if not sample:
        return None

    validated: Dict[str, int] = {}
    for field, idx in mapping.items():
        if field not in FIELD_VALIDATORS:
            validated[field] = idx
            continue

        ratio = _column_ratio(field, idx, sample)
        if ratio is None or ratio >= Config.COLUMN_VALIDATION_THRESHOLD:
            validated[field] = idx
        else:
            logger.debug(
                f"Column '{field}' (index {idx}, {source}) failed validation: "
                f"{ratio:.0%} of sampled cells matched"
            )

    if 'name' not in validated or _column_ratio('name', validated['name'], sample) is None:
        logger.debug(f"Name column not usable ({source} layout)")
        return None

    # A guessed layout must be confirmed by more than the name column,
    # otherwise any table with a capitalized second column would qualify
    if source == POSITIONAL and not any(
        field in validated and _column_ratio(field, validated[field], sample)
        for field in ('number', 'position')
    ):
        logger.debug("Positional layout not confirmed by number or position column")
        return None

    return ColumnMap(columns=dict(validated), source=source)
