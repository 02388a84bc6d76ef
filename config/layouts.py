"""
Roster Layout Configuration Module
==================================

This module contains what we know about how athletics websites lay out
their football rosters. It defines the CSS selectors, header synonyms and
column layouts that each extraction strategy probes.

For Junior Developers:
---------------------
Every athletics department uses some vendor platform (SideArm, WMT, PrestoSports,
home-grown Drupal, ...) and each platform marks up its roster differently.
This file centralizes all of that layout-specific knowledge so the
strategies themselves contain only the matching logic.

When a new site layout shows up, add its selectors here first.

Usage:
    from config.layouts import get_layout_config, HEADER_SYNONYMS

    cards = get_layout_config('cards')
    print(cards['card_selectors'])
"""

from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional, Tuple

# ==============================================================================
# Table Header Synonyms
# ==============================================================================
# Header cell text (lowercased, whitespace collapsed) -> roster field.
# The first column whose header matches a field wins.
HEADER_SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'number': ('#', 'no', 'no.', 'num', 'num.', 'number', 'jersey', 'jersey number', 'jersey #'),
    'name': ('name', 'full name', 'player', 'player name', 'athlete', 'student-athlete'),
    'position': ('pos', 'pos.', 'position', 'positions'),
    'year': (
        'yr', 'yr.', 'year', 'class', 'cl', 'cl.', 'class year', 'academic year',
        'eligibility', 'elig', 'elig.', 'exp', 'exp.',
    ),
    'height': ('ht', 'ht.', 'height'),
    'weight': ('wt', 'wt.', 'weight'),
    'hometown': (
        'hometown', 'home town', 'hometown/high school', 'hometown / high school',
        'hometown/previous school', 'hometown / previous school',
    ),
    'high_school': ('high school', 'hs', 'h.s.', 'high school/previous school'),
    'previous_school': (
        'previous school', 'prev. school', 'previous college', 'last school',
        'former school', 'transfer', 'college',
    ),
})

# Column order assumed when a table has no recognizable name header.
POSITIONAL_COLUMNS: Tuple[str, ...] = (
    'number',
    'name',
    'position',
    'year',
    'height',
    'weight',
    'hometown',
    'high_school',
    'previous_school',
)

# ==============================================================================
# Strategy Layout Definitions
# ==============================================================================
# Each strategy has a dictionary of the selectors it probes, in priority order.

LAYOUTS: Dict[str, Dict[str, Any]] = {
    # ==========================================================================
    # TABLES (header-mapped and heuristic-scan strategies)
    # ==========================================================================
    'tables': {
        # Tables matching these are tried before any other table on the page
        'preferred_selectors': (
            '.sidearm-roster-players-container table',
            '.roster-players table',
            'table.roster',
            'table[class*="roster"]',
            '[class*="roster"] table',
            'table.sidearm-table',
            '[data-roster] table',
            '#roster table',
        ),
        # Link selectors that usually hold the player's name, most specific first
        'name_link_selectors': (
            'a.table__roster-name',
            'a[class*="roster-name"]',
            'a[class*="player-name"]',
            'th a[href*="/roster/"]',
            'a[href*="/roster/player/"]',
            'a[href*="/roster/"]',
            'a[href*="/player/"]',
        ),
        # Rows carrying these classes are staff rows mixed into the table
        'staff_row_pattern': r'staff|coach',
    },

    # ==========================================================================
    # CARD / GRID LAYOUTS
    # ==========================================================================
    'cards': {
        'card_selectors': (
            '.s-person-card',
            '.sidearm-roster-player',
            '.roster-list-item',
            '.roster-player',
            '.player-card',
            '[class*="player-card"]',
            '[class*="roster-card"]',
        ),
        # Name probes, headings with profile links first
        'name_selectors': (
            'h3 a[href*="/roster/"]',
            'h2 a[href*="/roster/"]',
            'h4 a[href*="/roster/"]',
            '.roster-list-item__title a',
            '.sidearm-roster-player-name a',
            '.s-person-card__content a[href*="/roster/"]',
            '.s-person-details a[href*="/roster/"]',
            '[class*="person-name"] a',
            '[class*="player-name"] a',
            'a[class*="person-name"]',
            'a[class*="player-name"]',
            'a[class*="name"][href*="/roster/"]',
            'a[href*="/roster/player/"]',
            '.roster-list-item__title',
            '.s-person-details__personal-single-line',
            '.player-name',
            '.name',
            'h3',
            'h4',
        ),
        'fallback_link_selector': 'a[href*="/roster/"]',
        'number_selectors': (
            '.s-person-card__header__jersey-number',
            '.roster-list-item__jersey-number',
            '.sidearm-roster-player-jersey-number',
            '.jersey-number',
            '[class*="jersey"]',
            '.number',
        ),
        'position_selectors': (
            '.s-person-details__position',
            '.s-person-card__position span',
            '.roster-player-list-profile-field--position',
            '.sidearm-roster-player-position',
            '.position',
            '[class*="position"]',
        ),
        'year_selectors': (
            '.roster-player-list-profile-field--class-level',
            '.sidearm-roster-player-academic-year',
            '[class*="academic-year"]',
            '.year',
            '.class',
        ),
        'height_selectors': (
            '.roster-player-list-profile-field--height',
            '.sidearm-roster-player-height',
            '[class*="height"]',
        ),
        'weight_selectors': (
            '.roster-player-list-profile-field--weight',
            '.sidearm-roster-player-weight',
            '[class*="weight"]',
        ),
        'hometown_selectors': (
            '.roster-player-list-profile-field--hometown',
            '.sidearm-roster-player-hometown',
            '[class*="hometown"]',
        ),
        'high_school_selectors': (
            '.roster-player-list-profile-field--high-school',
            '.sidearm-roster-player-highschool',
            '[class*="highschool"]',
            '[class*="high-school"]',
        ),
        'previous_school_selectors': (
            '.roster-player-list-profile-field--previous-school',
            '.sidearm-roster-player-previous-school',
            '[class*="previous-school"]',
        ),
        # SideArm "s-person" cards list stats as labelled items
        'bio_stat_selector': '.s-person-details__bio-stats-item',
        'location_item_selector': '.s-person-card__content__person__location-item',
    },

    # ==========================================================================
    # GENERIC LINK SWEEP (last resort)
    # ==========================================================================
    'link_sweep': {
        # Profile links: /roster/player/..., or /roster/<slug>/<id>
        'player_href_pattern': r'/roster/(?:player/|(?!coaches?/|staff/)[\w-]+/\d+)',
        # Nearest ancestor that holds the rest of the player's data
        'container_tags': ('tr', 'li', 'article'),
        'container_class_pattern': r'card|player',
    },

    # ==========================================================================
    # TEAM METADATA
    # ==========================================================================
    'team': {
        'site_name_meta': 'meta[property="og:site_name"]',
        'name_selectors': ('.school-name', '.site-header__logo-text'),
        'logo_selectors': ('.site-header img', 'header img', '[class*="header"] img'),
        'theme_color_meta': 'meta[name="theme-color"]',
        'secondary_color_meta': 'meta[name="msapplication-TileColor"]',
    },
}


def get_layout_config(name: str) -> Optional[Dict[str, Any]]:
    """
    Get the selector configuration for one extraction strategy.

    Args:
        name: Layout key (e.g., 'tables', 'cards', 'link_sweep', 'team')

    Returns:
        Dictionary with layout configuration, or None if not found

    Example:
        cards = get_layout_config('cards')
        for selector in cards['card_selectors']:
            print(selector)
    """
    return LAYOUTS.get(name.lower())
