"""
Team Metadata
=============

Reads the team's name and colors from the roster page itself.

The name comes from the first probe that yields usable text:

1. <meta property="og:site_name">
2. the page <title> ("Football Roster - Ohio State Buckeyes")
3. a school-name / logo-text element
4. the alt text of the header logo

Colors come from the theme-color and msapplication-TileColor meta tags.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup
from loguru import logger

from config.layouts import get_layout_config
from config.settings import Config
from scrapers.football.detectors import clean_text, element_text
from scrapers.football.models import TeamInfo

# "Football Roster - Ohio State Buckeyes", "2024 Roster – Penn State Athletics"
TITLE_TEAM_PATTERN = re.compile(
    r'(?:Roster|Football).*?[-–]\s*(.+?)(?:\s*(?:Official|Athletics))?$',
    re.IGNORECASE,
)
ROSTER_SUFFIX_PATTERN = re.compile(r'\s*(Football\s*)?Roster.*', re.IGNORECASE)

MIN_TEAM_NAME_LENGTH = 3


def _usable(name: Optional[str]) -> str:
    """Strip a trailing 'Football Roster ...' and reject too-short names."""
    name = ROSTER_SUFFIX_PATTERN.sub('', clean_text(name)).strip()
    return name if len(name) >= MIN_TEAM_NAME_LENGTH else ''


def _meta_content(soup: BeautifulSoup, selector: str) -> str:
    tag = soup.select_one(selector)
    if tag is None:
        return ''
    return clean_text(tag.get('content'))


def team_name_from_title(title: str) -> str:
    """Team name from a page title, or '' when the title gives none."""
    title = clean_text(title)
    if not title:
        return ''
    match = TITLE_TEAM_PATTERN.search(title)
    if match:
        return _usable(match.group(1))
    return _usable(title.split('-')[0])


def extract_team_name(soup: BeautifulSoup) -> str:
    layout = get_layout_config('team')

    name = _usable(_meta_content(soup, layout['site_name_meta']))
    if name:
        return name

    if soup.title is not None:
        name = team_name_from_title(soup.title.get_text())
        if name:
            return name

    for selector in layout['name_selectors']:
        name = _usable(element_text(soup.select_one(selector)))
        if name:
            return name

    for selector in layout['logo_selectors']:
        logo = soup.select_one(selector)
        if logo is not None:
            name = _usable(logo.get('alt'))
            if name:
                return name

    return Config.DEFAULT_TEAM_NAME


def extract_team_info(soup: BeautifulSoup, roster_url: str = '') -> TeamInfo:
    """
    Build the TeamInfo for a roster page.

    Args:
        soup: Parsed roster page
        roster_url: URL the page was loaded from

    Returns:
        TeamInfo with defaults for anything the page does not provide
    """
    layout = get_layout_config('team')

    team = TeamInfo(
        name=extract_team_name(soup),
        primary_color=_meta_content(soup, layout['theme_color_meta']) or Config.DEFAULT_PRIMARY_COLOR,
        secondary_color=_meta_content(soup, layout['secondary_color_meta']) or Config.DEFAULT_SECONDARY_COLOR,
        roster_url=roster_url,
    )
    logger.debug(f"Team info: {team.name} ({team.primary_color} / {team.secondary_color})")
    return team
