"""
Candidate Detectors
===================

Pure pattern tests that decide what a piece of roster text "looks like":
a player name, a school, a position code, a class year, a height, a weight,
a jersey number or a hometown. None of them depend on a particular page
layout, which is what lets every extraction strategy share them.

For Junior Developers:
---------------------
Roster pages mix players, coaches, sponsor banners and navigation links
inside the same containers. Rather than trusting where a value sits on the
page, the strategies ask these functions whether a value is plausible. Each
function only looks at its input - same text in, same answer out.

Usage:
    from scrapers.football.detectors import is_valid_player_name, find_height

    is_valid_player_name('Jane Doe')       # True
    is_valid_player_name('Full Bio')       # False
    find_height('WR | 6-2 | 195 lbs')      # '6-2'
"""

import re
from typing import Optional, Tuple

from bs4 import Tag

from config.settings import Config
from scrapers.football.normalizers import POSITION_MAP


# ==============================================================================
# Patterns
# ==============================================================================
SCHOOL_PATTERN = re.compile(
    r'\b(high school|h\.s\.|academy|prep|preparatory|school|christian|catholic|'
    r'regional|county|college|university|institute)\b',
    re.IGNORECASE,
)
HS_ABBREVIATION_PATTERN = re.compile(r'\bHS\b')
STATE_SUFFIX_PATTERN = re.compile(r',\s*[A-Z]{2}$')

NAME_EXCLUDE_PATTERN = re.compile(
    r'\b(roster|bio|stats|schedule|news|staff|coach|coordinator|director|analyst|'
    r'assistant|trainer|manager|operations|jersey\s*number|number\s*\d|full\s*bio|'
    r'view\s*bio|social\s*media)\b',
    re.IGNORECASE,
)

COACH_PATTERN = re.compile(
    r'\b(coach|coordinator|director|analyst|assistant|specialist|quality|control|'
    r'operations|recruiting|strength|conditioning|manager|chief|general|video|associate)\b',
    re.IGNORECASE,
)

STAFF_SECTION_PATTERN = re.compile(r'staff|coach|directory', re.IGNORECASE)

_POSITION_TOKENS = (
    r'EDGE|ATH|ILB|OLB|MLB|SNP|QB|RB|FB|HB|WR|TE|OL|OT|OG|DL|DT|NT|DE|LB|DB|CB|'
    r'SS|FS|PK|LS|KR|PR|C|S|K|P'
)
# A whole cell holding one position code or a combination like "DL/LB"
POSITION_CELL_PATTERN = re.compile(
    rf'^(?:{_POSITION_TOKENS})(?:\s*[/,]\s*(?:{_POSITION_TOKENS}))*$',
    re.IGNORECASE,
)
# A position code somewhere inside free text; uppercase only so that the
# "s" of a possessive or the "C" of "C.J." is not taken for a position
POSITION_TEXT_PATTERN = re.compile(
    rf'(?<![\w.\'’-])({_POSITION_TOKENS})(?![\w.\'’-])'
)

_YEAR_WORDS = (
    r'(?i:redshirt\s+(?:freshman|sophomore|junior|senior)|'
    r'(?:rs|r-)\s*(?:freshman|sophomore|junior|senior)|'
    r'freshman|sophomore|junior|senior|graduate(?:\s+student)?|grad\s+student|'
    r'[56]th\s+year)'
)
_YEAR_ABBREVIATIONS = (
    r'(?:R-|RS-?\s?|Redshirt\s)?(?:Fr|So|Jr|Sr|FR|SO|JR|SR)\.?|Gr\.?|GR\.?|Grad\.?'
)
YEAR_TEXT_PATTERN = re.compile(
    rf'(?<![\w-])({_YEAR_WORDS}|{_YEAR_ABBREVIATIONS})(?!\w)'
)
_YEAR_ONLY_PATTERN = re.compile(rf'^(?:{_YEAR_WORDS}|{_YEAR_ABBREVIATIONS})$')

HEIGHT_PATTERN = re.compile(
    r'(?<![\d-])([4-7]\s?(?:-|[\'′’])\s?\d{1,2}(?:["″”]|\'\')?)(?![\d-])'
)

# Case-sensitive: "44 LB" is a number and a position, not a weight
WEIGHT_UNIT_PATTERN = re.compile(
    r'(?<!\d)(\d{2,3})\s*(?:[lL]bs?\.?|LBS\.?|[pP]ounds?)(?![A-Za-z])'
)
WEIGHT_BARE_PATTERN = re.compile(r'^(\d{3})$')

NUMBER_CELL_PATTERN = re.compile(r'^#?\s*(\d{1,2})$')
_LEADING_NUMBER_PATTERN = re.compile(r'^\s*#?\s*(\d{1,3})')
_TEXT_NUMBER_PATTERNS = (
    re.compile(r'(?:^|\s)#(\d{1,2})(?=\s|$)'),
    re.compile(r'Jersey\s*Number\s*#?(\d{1,2})\b', re.IGNORECASE),
    re.compile(r'(?:^|\s)(\d{1,2})(?=\s|$)'),
)

_CITY = r"[A-Z][A-Za-z.'’-]*(?:\s+[A-Z][A-Za-z.'’-]*)*"
_STATE = r'(?:[A-Z]{2}|[A-Z][a-z]+\.?(?:\s+[A-Z][a-z]+\.?)*)'
HOMETOWN_PATTERN = re.compile(rf'^{_CITY},\s*{_STATE}(?=\s|$|/)')


# ==============================================================================
# Text Helpers
# ==============================================================================
def clean_text(value: Optional[str]) -> str:
    """Collapse runs of whitespace and strip the ends."""
    if not value:
        return ''
    return ' '.join(value.split())


def element_text(element: Optional[Tag]) -> str:
    """Whitespace-normalized text content of an element ('' for None)."""
    if element is None:
        return ''
    return clean_text(element.get_text(' ', strip=True))


# ==============================================================================
# Names, Schools and Staff
# ==============================================================================
def looks_like_player_name(text: Optional[str]) -> bool:
    """
    Check whether text is shaped like a player's name.

    A name is 3-50 characters, 1-5 words, starts with an uppercase letter,
    is not purely numeric, and is not navigation/staff vocabulary or a bare
    position, class-year or height token.
    """
    text = clean_text(text)
    if len(text) < 3 or len(text) > 50:
        return False

    words = text.split(' ')
    if len(words) > 5:
        return False

    if NAME_EXCLUDE_PATTERN.search(text):
        return False

    if not text[0].isupper():
        return False

    if text.replace(' ', '').isdigit():
        return False

    if (POSITION_CELL_PATTERN.match(text)
            or _YEAR_ONLY_PATTERN.match(text)
            or HEIGHT_PATTERN.fullmatch(text)):
        return False

    return True


def looks_like_school_name(text: Optional[str]) -> bool:
    """
    Check whether text names a school rather than a person.

    True for school vocabulary ("High School", "Academy", "Prep", ...) or
    for text of more than three words ending in a ", ST" state code.
    """
    text = clean_text(text)
    if not text:
        return False

    if SCHOOL_PATTERN.search(text) or HS_ABBREVIATION_PATTERN.search(text):
        return True

    return bool(STATE_SUFFIX_PATTERN.search(text)) and len(text.split(' ')) > 3


def is_valid_player_name(text: Optional[str]) -> bool:
    """A name candidate that is name-shaped and not a school."""
    return looks_like_player_name(text) and not looks_like_school_name(text)


def is_coach_position(text: Optional[str]) -> bool:
    """Check whether a position/title string belongs to a coach or staffer."""
    if not text:
        return False
    return bool(COACH_PATTERN.search(text))


SECTION_HEADINGS = ['h1', 'h2', 'h3', 'h4']


def _section_heading(node: Tag) -> Optional[Tag]:
    """
    The heading that titles a section: a direct child h1-h4, or a heading
    that is all a child wrapper holds ("<div class='section-title'><h2>...").

    Headings of nested sections and of cards never count.
    """
    for child in node.find_all(True, recursive=False):
        if child.name in SECTION_HEADINGS:
            return child
        heading = child.find(SECTION_HEADINGS)
        if heading is not None and element_text(heading) == element_text(child):
            return heading
    return None


def is_in_staff_section(element: Optional[Tag], depth: Optional[int] = None) -> bool:
    """
    Check whether an element sits inside a staff/coach directory.

    Walks the element and up to `depth` ancestors, looking at each one's
    class, id and own heading (see _section_heading) for staff vocabulary.

    Args:
        element: The element to test
        depth: Number of levels to inspect (defaults to Config.STAFF_SECTION_DEPTH)

    Returns:
        True if any inspected level looks like a staff section
    """
    levels = Config.STAFF_SECTION_DEPTH if depth is None else depth
    node = element

    for _ in range(levels):
        if not isinstance(node, Tag) or node.name == '[document]':
            break

        classes = node.get('class') or []
        if isinstance(classes, str):
            classes = [classes]

        heading = _section_heading(node)
        haystack = ' '.join([
            ' '.join(classes),
            node.get('id') or '',
            element_text(heading),
        ])
        if STAFF_SECTION_PATTERN.search(haystack):
            return True

        node = node.parent

    return False


# ==============================================================================
# Field Tokens
# ==============================================================================
def match_position_cell(text: Optional[str]) -> str:
    """
    Return the text if a whole cell is a position ("WR", "DL/LB",
    "Wide Receiver"), otherwise ''.
    """
    text = clean_text(text)
    if not text:
        return ''
    if POSITION_CELL_PATTERN.match(text) or text.upper() in POSITION_MAP:
        return text
    return ''


def find_position(text: Optional[str]) -> str:
    """First position code found inside free text, or ''."""
    match = POSITION_TEXT_PATTERN.search(text or '')
    return match.group(1) if match else ''


def find_year(text: Optional[str]) -> str:
    """First class-year token found inside text, or ''."""
    match = YEAR_TEXT_PATTERN.search(clean_text(text))
    return match.group(1) if match else ''


def find_height(text: Optional[str]) -> str:
    """First height token (6-2, 5'11") found inside text, or ''."""
    match = HEIGHT_PATTERN.search(text or '')
    return match.group(1).replace(' ', '') if match else ''


def find_weight(text: Optional[str], allow_bare: bool = True) -> str:
    """
    Weight found inside text, formatted as 'NNN lbs', or ''.

    Args:
        text: Text to search
        allow_bare: Also accept a value that is only three digits ("215").
            Only safe when the text is a single table cell.
    """
    text = clean_text(text)
    match = WEIGHT_UNIT_PATTERN.search(text)
    if not match and allow_bare:
        match = WEIGHT_BARE_PATTERN.match(text)
    return f"{match.group(1)} lbs" if match else ''


def match_number_cell(text: Optional[str]) -> bool:
    """Check whether a whole cell is a 1-2 digit jersey number."""
    return bool(NUMBER_CELL_PATTERN.match(clean_text(text)))


def parse_jersey_number(text: Optional[str]) -> int:
    """Leading 1-3 digits of a number cell as an int, 0 when absent."""
    match = _LEADING_NUMBER_PATTERN.match(text or '')
    return int(match.group(1)) if match else 0


def find_jersey_number(text: Optional[str]) -> int:
    """Jersey number found inside free text, 0 when absent."""
    text = clean_text(text)
    for pattern in _TEXT_NUMBER_PATTERNS:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return 0


def looks_like_hometown(text: Optional[str]) -> bool:
    """Check for "City, ST" / "City, State" text that is not a school."""
    text = clean_text(text)
    if not HOMETOWN_PATTERN.match(text):
        return False
    hometown, _ = split_hometown_line(text)
    return not SCHOOL_PATTERN.search(hometown)


def split_hometown_line(text: Optional[str]) -> Tuple[str, str]:
    """
    Split a combined "City, ST / High School" value.

    Returns:
        (hometown, school) - school is '' when the text has no separator
    """
    text = clean_text(text)
    if '/' not in text:
        return text, ''
    hometown, school = text.split('/', 1)
    return hometown.strip(), school.strip()
