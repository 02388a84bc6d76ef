"""
Roster Extractor
================

The orchestrator: turns one parsed roster page into a RosterResult.

How it works:
1. Read the team metadata (name, colors) from the page.
2. Try each strategy in scrapers.football.strategies.STRATEGIES in order and
   stop at the first one that returns at least one record.
3. Clean every record: collapse whitespace in the name (and drop names of two
   characters or fewer), normalize position and year, resolve the profile
   URL against the page origin.
4. Drop repeated players (same name, ignoring case), keeping the first.

An empty roster is never a valid result: when no strategy finds a player,
NoRosterFound is raised.

For Junior Developers:
---------------------
The extractor never fetches anything. Give it a BeautifulSoup document and
the URL it came from and it always returns the same answer, which is what
makes it easy to test against saved HTML:

    with open('page-debug.html') as f:
        result = extract_roster_from_html(f.read(), 'https://example.edu/roster')
    print(result.team.name, len(result.roster))
"""

import dataclasses
from typing import Iterable, List, Optional, Sequence, Tuple
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup
from loguru import logger

from scrapers.exceptions import NoRosterFound
from scrapers.football.detectors import clean_text
from scrapers.football.models import PlayerRecord, RosterResult
from scrapers.football.normalizers import normalize_position, normalize_year
from scrapers.football.strategies import STRATEGIES, StrategyFn
from scrapers.football.team_info import extract_team_info

MIN_NAME_LENGTH = 3


def page_origin(url: str) -> str:
    """scheme://host[:port] of a URL, or '' when it has none."""
    parsed = urlparse(url or '')
    if not parsed.scheme or not parsed.netloc:
        return ''
    return f"{parsed.scheme}://{parsed.netloc}"


def resolve_url(href: str, origin: str) -> str:
    """Absolute form of a profile href; relative hrefs resolve against the origin."""
    if not href:
        return ''
    if urlparse(href).scheme in ('http', 'https'):
        return href
    if not origin:
        return href
    return urljoin(origin + '/', href)


def run_strategies(
    soup: BeautifulSoup,
    strategies: Sequence[Tuple[str, StrategyFn]] = STRATEGIES
) -> Tuple[str, List[PlayerRecord]]:
    """
    Run the strategies in order until one produces records.

    A strategy that raises is logged and counts as having found nothing.

    Returns:
        (strategy name, raw records), or ('', []) when every strategy is empty
    """
    for name, strategy in strategies:
        try:
            records = strategy(soup)
        except Exception as e:
            logger.error(f"Strategy {name} failed: {type(e).__name__}: {e}")
            continue

        if records:
            logger.info(f"Strategy {name} found {len(records)} players")
            return name, records

        logger.debug(f"Strategy {name} found no players")

    return '', []


def clean_record(record: PlayerRecord, origin: str) -> Optional[PlayerRecord]:
    """Normalized copy of a raw record, or None when its name is unusable."""
    name = clean_text(record.name)
    if len(name) < MIN_NAME_LENGTH:
        return None

    return dataclasses.replace(
        record,
        name=name,
        number=max(record.number or 0, 0),
        position=normalize_position(record.position),
        year=normalize_year(record.year),
        url=resolve_url(record.url, origin),
    )


def dedupe_by_name(records: Iterable[PlayerRecord]) -> List[PlayerRecord]:
    """
    Keep the first record for each case-insensitive name.

    Two different players who share a name are merged into one.
    """
    seen = set()
    unique = []
    for record in records:
        key = record.name.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)
    return unique


def extract_roster(
    document: BeautifulSoup,
    origin_url: str,
    strategies: Sequence[Tuple[str, StrategyFn]] = STRATEGIES
) -> RosterResult:
    """
    Extract the team and its roster from a parsed roster page.

    Args:
        document: Parsed roster page
        origin_url: URL the page was loaded from; relative player links are
            resolved against its scheme and host
        strategies: Ordered (name, strategy) pairs to try

    Returns:
        RosterResult with at least one player

    Raises:
        NoRosterFound: When no strategy finds a single player
    """
    team = extract_team_info(document, origin_url)
    strategy, raw_records = run_strategies(document, strategies)

    origin = page_origin(origin_url)
    cleaned = [clean_record(record, origin) for record in raw_records]
    roster = dedupe_by_name(record for record in cleaned if record is not None)

    if not roster:
        logger.error(f"No roster found on {origin_url}")
        raise NoRosterFound(origin_url)

    if len(roster) < len(raw_records):
        logger.debug(f"Dropped {len(raw_records) - len(roster)} duplicate or unnamed entries")

    logger.info(f"Extracted {len(roster)} players for {team.name} using {strategy}")
    return RosterResult(team=team, roster=tuple(roster), strategy=strategy)


def extract_roster_from_html(html: str, url: str) -> RosterResult:
    """Parse raw HTML with lxml and extract the roster from it."""
    return extract_roster(BeautifulSoup(html, 'lxml'), url)
