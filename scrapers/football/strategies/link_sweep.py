"""
Generic Link-Sweep Strategy
===========================

Last resort: every link on the page whose href looks like a player profile
(/roster/player/..., /roster/<slug>/<id>) and whose text is a valid name
becomes a player. The remaining fields are regex-scanned from the nearest
row, list item, article or card around the link.
"""

import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from config.layouts import get_layout_config
from scrapers.football.detectors import (
    element_text,
    find_height,
    find_jersey_number,
    find_position,
    find_weight,
    find_year,
    is_in_staff_section,
    is_valid_player_name,
)
from scrapers.football.models import PlayerRecord
from scrapers.football.strategies.base import collect_records, link_href

STRATEGY_NAME = 'link_sweep'


def find_container(link: Tag) -> Optional[Tag]:
    """Nearest ancestor that holds the rest of the player's data."""
    layout = get_layout_config('link_sweep')
    class_pattern = re.compile(layout['container_class_pattern'], re.IGNORECASE)

    for parent in link.parents:
        if parent.name == '[document]':
            break
        if parent.name in layout['container_tags']:
            return parent
        if class_pattern.search(' '.join(parent.get('class') or [])):
            return parent

    return None


def read_link(link: Tag) -> Optional[PlayerRecord]:
    if is_in_staff_section(link):
        return None

    name = element_text(link)
    if not is_valid_player_name(name):
        return None

    text = element_text(find_container(link)).replace(name, ' ', 1)

    return PlayerRecord(
        name=name,
        number=find_jersey_number(text),
        position=find_position(text),
        year=find_year(text),
        height=find_height(text),
        weight=find_weight(text, allow_bare=False),
        url=link_href(link),
    )


def extract_player_links(soup: BeautifulSoup) -> List[PlayerRecord]:
    """Strategy 4: sweep the whole document for player profile links."""
    pattern = re.compile(get_layout_config('link_sweep')['player_href_pattern'], re.IGNORECASE)
    links = [link for link in soup.find_all('a', href=True) if pattern.search(link['href'])]
    return collect_records(links, read_link, STRATEGY_NAME)
