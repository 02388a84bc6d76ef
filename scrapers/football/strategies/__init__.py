"""
Roster Extraction Strategies
============================

Each strategy is a pure function (BeautifulSoup) -> List[PlayerRecord]
tied to one assumed page layout. STRATEGIES lists them in the order the
extractor tries them; the first one that returns a record wins.

1. header_table - roster table read through its header row
2. scan_table   - roster table read by scanning every cell of every row
3. cards        - grid of player cards
4. link_sweep   - player profile links anywhere on the page
"""

from typing import Tuple

from scrapers.football.strategies.base import StrategyFn
from scrapers.football.strategies.cards import extract_cards
from scrapers.football.strategies.header_table import extract_header_mapped_table
from scrapers.football.strategies.link_sweep import extract_player_links
from scrapers.football.strategies.scan_table import extract_scanned_tables

STRATEGIES: Tuple[Tuple[str, StrategyFn], ...] = (
    ('header_table', extract_header_mapped_table),
    ('scan_table', extract_scanned_tables),
    ('cards', extract_cards),
    ('link_sweep', extract_player_links),
)

__all__ = [
    'STRATEGIES',
    'StrategyFn',
    'extract_header_mapped_table',
    'extract_scanned_tables',
    'extract_cards',
    'extract_player_links',
]
