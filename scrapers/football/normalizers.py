"""
Field Normalizers
=================

Map the many ways athletics sites spell a position or class year onto the
short canonical codes stored in a PlayerRecord.

The tables are deliberately over-inclusive: pages vary in terminology, and a
synonym we know about is always better than a guess. Values we cannot map
degrade to a best-effort value instead of failing the whole record.

Usage:
    from scrapers.football.normalizers import normalize_position, normalize_year

    normalize_position('Wide Receiver')   # 'WR'
    normalize_year('RS Junior')           # 'R-Jr.'
"""

import re
from types import MappingProxyType

from scrapers.football.models import UNKNOWN


# ==============================================================================
# Positions
# ==============================================================================
POSITION_CODES = frozenset({
    'QB', 'RB', 'FB', 'WR', 'TE', 'OL', 'OT', 'OG', 'C',
    'DL', 'DT', 'DE', 'NT', 'LB', 'CB', 'S', 'DB',
    'K', 'P', 'LS', 'KR', 'PR', 'ATH',
})

POSITION_MAP = MappingProxyType({
    # Offense
    'QUARTERBACK': 'QB',
    'RUNNING BACK': 'RB',
    'TAILBACK': 'RB',
    'HALFBACK': 'RB',
    'HB': 'RB',
    'FULLBACK': 'FB',
    'WIDE RECEIVER': 'WR',
    'RECEIVER': 'WR',
    'TIGHT END': 'TE',
    'OFFENSIVE LINE': 'OL',
    'OFFENSIVE LINEMAN': 'OL',
    'OFFENSIVE TACKLE': 'OT',
    'TACKLE': 'OT',
    'OFFENSIVE GUARD': 'OG',
    'GUARD': 'OG',
    'CENTER': 'C',
    # Defense
    'DEFENSIVE LINE': 'DL',
    'DEFENSIVE LINEMAN': 'DL',
    'DEFENSIVE END': 'DE',
    'EDGE': 'DE',
    'DEFENSIVE TACKLE': 'DT',
    'NOSE TACKLE': 'NT',
    'NOSE GUARD': 'NT',
    'LINEBACKER': 'LB',
    'INSIDE LINEBACKER': 'LB',
    'OUTSIDE LINEBACKER': 'LB',
    'MIDDLE LINEBACKER': 'LB',
    'ILB': 'LB',
    'OLB': 'LB',
    'MLB': 'LB',
    'CORNERBACK': 'CB',
    'CORNER': 'CB',
    'SAFETY': 'S',
    'FREE SAFETY': 'S',
    'STRONG SAFETY': 'S',
    'SS': 'S',
    'FS': 'S',
    'DEFENSIVE BACK': 'DB',
    'NICKEL': 'DB',
    # Special teams
    'KICKER': 'K',
    'PLACEKICKER': 'K',
    'PLACE KICKER': 'K',
    'PK': 'K',
    'PUNTER': 'P',
    'LONG SNAPPER': 'LS',
    'SNAPPER': 'LS',
    'SNP': 'LS',
    'KICK RETURNER': 'KR',
    'PUNT RETURNER': 'PR',
    'ATHLETE': 'ATH',
})

# Separators used for multi-position values like "DL/LB" or "WR, KR"
_MULTI_POSITION_SPLIT = re.compile(r'\s*[/,|&]\s*')


def normalize_position(raw: str) -> str:
    """
    Convert a raw position string into a canonical position code.

    Lookup order:
    1. The full value in POSITION_MAP (e.g. 'WIDE RECEIVER')
    2. The full value when it already is a code (e.g. 'QB')
    3. The first part of a multi-position value (e.g. 'DL/LB' -> 'DL')
    4. Best effort: letters only, truncated to three characters

    Args:
        raw: Position text as it appeared on the page

    Returns:
        A position code, or 'Unknown' for empty input
    """
    if not raw:
        return UNKNOWN

    upper = ' '.join(raw.upper().split())
    if not upper:
        return UNKNOWN

    if upper in POSITION_MAP:
        return POSITION_MAP[upper]
    if upper in POSITION_CODES:
        return upper

    parts = [p for p in _MULTI_POSITION_SPLIT.split(upper) if p]
    if len(parts) > 1:
        return normalize_position(parts[0])

    code = re.sub(r'[^A-Z]', '', upper)[:3]
    return code or UNKNOWN


# ==============================================================================
# Class Years
# ==============================================================================
YEAR_CODES = frozenset({
    'Fr.', 'So.', 'Jr.', 'Sr.',
    'R-Fr.', 'R-So.', 'R-Jr.', 'R-Sr.',
    'Gr.',
})

YEAR_MAP = MappingProxyType({
    'FRESHMAN': 'Fr.', 'SOPHOMORE': 'So.', 'JUNIOR': 'Jr.', 'SENIOR': 'Sr.',
    'FR': 'Fr.', 'SO': 'So.', 'JR': 'Jr.', 'SR': 'Sr.',
    'FR.': 'Fr.', 'SO.': 'So.', 'JR.': 'Jr.', 'SR.': 'Sr.',
    'TRUE FRESHMAN': 'Fr.',

    'REDSHIRT FRESHMAN': 'R-Fr.', 'REDSHIRT SOPHOMORE': 'R-So.',
    'REDSHIRT JUNIOR': 'R-Jr.', 'REDSHIRT SENIOR': 'R-Sr.',
    'RS FRESHMAN': 'R-Fr.', 'RS SOPHOMORE': 'R-So.',
    'RS JUNIOR': 'R-Jr.', 'RS SENIOR': 'R-Sr.',
    'R-FRESHMAN': 'R-Fr.', 'R-SOPHOMORE': 'R-So.',
    'R-JUNIOR': 'R-Jr.', 'R-SENIOR': 'R-Sr.',
    'R-FR': 'R-Fr.', 'R-SO': 'R-So.', 'R-JR': 'R-Jr.', 'R-SR': 'R-Sr.',
    'R-FR.': 'R-Fr.', 'R-SO.': 'R-So.', 'R-JR.': 'R-Jr.', 'R-SR.': 'R-Sr.',
    'RS FR.': 'R-Fr.', 'RS SO.': 'R-So.', 'RS JR.': 'R-Jr.', 'RS SR.': 'R-Sr.',
    'RS-FR.': 'R-Fr.', 'RS-SO.': 'R-So.', 'RS-JR.': 'R-Jr.', 'RS-SR.': 'R-Sr.',
    'REDSHIRT FR.': 'R-Fr.', 'REDSHIRT SO.': 'R-So.',
    'REDSHIRT JR.': 'R-Jr.', 'REDSHIRT SR.': 'R-Sr.',

    'GRADUATE': 'Gr.', 'GRAD': 'Gr.', 'GRAD.': 'Gr.',
    'GRADUATE STUDENT': 'Gr.', 'GRAD STUDENT': 'Gr.', 'GRAD TRANSFER': 'Gr.',
    'GR': 'Gr.', 'GR.': 'Gr.',
    '5TH YEAR': 'Sr.', 'FIFTH YEAR': 'Sr.', '5TH': 'Sr.',
    '6TH YEAR': 'Gr.', 'SIXTH YEAR': 'Gr.',
})


def normalize_year(raw: str) -> str:
    """
    Convert a raw class-year string into a canonical class-year code.

    Args:
        raw: Class year text as it appeared on the page

    Returns:
        The canonical code, the trimmed input if it is not in the table,
        or 'Unknown' for empty input
    """
    if not raw:
        return UNKNOWN

    trimmed = ' '.join(raw.split())
    if not trimmed:
        return UNKNOWN
    if trimmed in YEAR_CODES:
        return trimmed

    upper = trimmed.upper()
    return YEAR_MAP.get(upper, trimmed)
