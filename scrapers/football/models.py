"""
Roster Data Models
==================

Plain data containers produced by the roster extractor.

Records are frozen: each extraction run builds a fresh snapshot, and the
orchestrator derives normalized copies with dataclasses.replace() instead
of mutating what a strategy returned.

The JSON shapes (to_dict) use the camelCase keys the roster front end
expects: highSchool, previousSchool, primaryColor, secondaryColor, rosterUrl.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Tuple

from config.settings import Config


UNKNOWN = 'Unknown'


@dataclass(frozen=True)
class PlayerRecord:
    """One player as read from a roster page."""
    name: str
    number: int = 0
    position: str = UNKNOWN
    year: str = UNKNOWN
    height: str = ''
    weight: str = ''
    hometown: str = ''
    high_school: str = ''
    previous_school: str = ''
    url: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'number': self.number,
            'position': self.position,
            'year': self.year,
            'height': self.height,
            'weight': self.weight,
            'hometown': self.hometown,
            'highSchool': self.high_school,
            'previousSchool': self.previous_school,
            'url': self.url,
        }


@dataclass(frozen=True)
class TeamInfo:
    """Page-level metadata about the team whose roster was scraped."""
    name: str = Config.DEFAULT_TEAM_NAME
    primary_color: str = Config.DEFAULT_PRIMARY_COLOR
    secondary_color: str = Config.DEFAULT_SECONDARY_COLOR
    roster_url: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'primaryColor': self.primary_color,
            'secondaryColor': self.secondary_color,
            'rosterUrl': self.roster_url,
        }


@dataclass(frozen=True)
class RosterResult:
    """
    Output of a successful extraction run.

    Attributes:
        team: Team metadata
        roster: Normalized, deduplicated players in page order
        strategy: Name of the strategy that produced the roster
    """
    team: TeamInfo
    roster: Tuple[PlayerRecord, ...] = field(default_factory=tuple)
    strategy: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'team': self.team.to_dict(),
            'roster': [player.to_dict() for player in self.roster],
        }

    def roster_dicts(self) -> List[Dict[str, Any]]:
        return [player.to_dict() for player in self.roster]
