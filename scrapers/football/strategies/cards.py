"""
Card / Grid Strategy
====================

Strategy 3, for rosters laid out as a grid of player cards (SideArm
"s-person-card", roster list items, generic player cards) rather than a
table.

For each top-level card:

- the name comes from the first name selector whose text is a valid name
  (profile links inside headings are tried first), then from any roster link;
- each detail field is read from a dedicated child element when the card has
  one (SideArm bio-stats items by their label, then the layout's field
  selectors), otherwise by regex-scanning the card's own text.

Cards inside a staff section, cards that link to a /coaches/ page and cards
whose position is a staff title are skipped.
"""

import re
from typing import Dict, List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, Tag

from config.layouts import get_layout_config
from scrapers.football.detectors import (
    element_text,
    find_height,
    find_jersey_number,
    find_position,
    find_weight,
    find_year,
    is_coach_position,
    is_in_staff_section,
    is_valid_player_name,
    split_hometown_line,
)
from scrapers.football.models import PlayerRecord
from scrapers.football.normalizers import POSITION_MAP
from scrapers.football.strategies.base import collect_records, link_href

STRATEGY_NAME = 'cards'

LABEL_PATTERN = re.compile(
    r'^(academic year|class|year|position|pos|height|ht|weight|wt|hometown|'
    r'high school|last school|previous school)\b\.?\s*:?\s*',
    re.IGNORECASE,
)

LABEL_FIELDS = {
    'academic year': 'year',
    'class': 'year',
    'year': 'year',
    'position': 'position',
    'pos': 'position',
    'height': 'height',
    'ht': 'height',
    'weight': 'weight',
    'wt': 'weight',
    'hometown': 'hometown',
    'high school': 'high_school',
    'last school': 'previous_school',
    'previous school': 'previous_school',
}

COACH_LINK_PATTERN = re.compile(r'/coaches?/', re.IGNORECASE)


def strip_label(text: str) -> str:
    """Drop a leading field label such as 'Position:' or 'Academic Year'."""
    return LABEL_PATTERN.sub('', text, count=1).strip()


def split_labelled(elements: Sequence[Tag]) -> Tuple[Dict[str, str], List[str]]:
    """
    Sort item texts into labelled values and unlabelled leftovers.

    Returns:
        ({field: value}, [unlabelled texts in page order])
    """
    labelled: Dict[str, str] = {}
    unlabelled: List[str] = []

    for element in elements:
        text = element_text(element)
        match = LABEL_PATTERN.match(text)
        if match:
            field = LABEL_FIELDS[match.group(1).lower()]
            value = text[match.end():].strip()
            if value and field not in labelled:
                labelled[field] = value
        elif text:
            unlabelled.append(text)

    return labelled, unlabelled


def select_text(card: Tag, selectors: Sequence[str]) -> str:
    """Label-stripped text of the first selector match with any content."""
    for selector in selectors:
        element = card.select_one(selector)
        if element is None:
            continue
        text = strip_label(element_text(element))
        if text:
            return text
    return ''


def find_cards(soup: BeautifulSoup) -> List[Tag]:
    """
    All top-level roster cards in page order.

    A card nested inside another matched card (SideArm wraps its details in
    several "player"-classed elements) is part of its parent, not a card of
    its own. A match holding matched cards for two or more different players
    is the grid around the cards ("roster-cards", "player-cards-grid"), so
    its inner cards are used instead.
    """
    layout = get_layout_config('cards')
    matches = soup.select(', '.join(layout['card_selectors']))
    matched = {id(card) for card in matches}

    def is_grid(card: Tag) -> bool:
        names = set()
        for inner in card.find_all(True):
            if id(inner) in matched:
                name = card_name(inner)[0].lower()
                if name:
                    names.add(name)
        return len(names) >= 2

    grids = {id(card) for card in matches if is_grid(card)}
    cards = {key for key in matched if key not in grids}

    return [
        card for card in matches
        if id(card) in cards and not any(id(parent) in cards for parent in card.parents)
    ]


def card_name(card: Tag) -> Tuple[str, str]:
    """
    Player name and profile href of a card.

    Returns:
        (name, href), or ('', '') when no probe yields a valid name
    """
    layout = get_layout_config('cards')

    for selector in layout['name_selectors']:
        element = card.select_one(selector)
        if element is None:
            continue
        candidate = element_text(element)
        if is_valid_player_name(candidate):
            link = element if element.name == 'a' else element.find('a', href=True)
            return candidate, link_href(link)

    for link in card.select(layout['fallback_link_selector']):
        candidate = element_text(link)
        if is_valid_player_name(candidate):
            return candidate, link_href(link)

    return '', ''


def read_card(card: Tag) -> Optional[PlayerRecord]:
    """Build a raw record from one card, or None when it is not a player."""
    if is_in_staff_section(card):
        return None

    if any(COACH_LINK_PATTERN.search(link.get('href', '')) for link in card.find_all('a', href=True)):
        return None

    name, href = card_name(card)
    if not name:
        return None

    layout = get_layout_config('cards')
    stats, _ = split_labelled(card.select(layout['bio_stat_selector']))
    # The name is taken out so "Jr." in "John Smith Jr." is not read as a class year
    text = element_text(card).replace(name, ' ', 1)

    position = stats.get('position') or select_text(card, layout['position_selectors'])
    if not position or (len(position) > 10 and position.upper() not in POSITION_MAP):
        position = find_position(text) or position
    if is_coach_position(position):
        return None

    number = find_jersey_number(select_text(card, layout['number_selectors']))
    if not number:
        number = find_jersey_number(text)

    year = (
        find_year(stats.get('year'))
        or find_year(select_text(card, layout['year_selectors']))
        or find_year(text)
    )
    height = (
        find_height(stats.get('height'))
        or find_height(select_text(card, layout['height_selectors']))
        or find_height(text)
    )
    weight = (
        find_weight(stats.get('weight'))
        or find_weight(select_text(card, layout['weight_selectors']))
        or find_weight(text, allow_bare=False)
    )

    location, loose = split_labelled(card.select(layout['location_item_selector']))
    hometown = (
        location.get('hometown')
        or (loose[0] if loose else '')
        or select_text(card, layout['hometown_selectors'])
    )
    high_school = (
        location.get('high_school')
        or (loose[1] if len(loose) > 1 else '')
        or select_text(card, layout['high_school_selectors'])
    )
    previous_school = (
        location.get('previous_school')
        or select_text(card, layout['previous_school_selectors'])
    )
    if not high_school:
        hometown, high_school = split_hometown_line(hometown)

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


def extract_cards(soup: BeautifulSoup) -> List[PlayerRecord]:
    """Strategy 3: read every top-level roster card."""
    return collect_records(find_cards(soup), read_card, STRATEGY_NAME)
