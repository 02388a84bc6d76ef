"""
Football Roster Scraping
========================

Multi-strategy extraction of football rosters from athletics websites.
"""

from scrapers.football.extractor import extract_roster, extract_roster_from_html
from scrapers.football.models import PlayerRecord, RosterResult, TeamInfo
from scrapers.football.roster_scraper import FootballRosterScraper

__all__ = [
    'FootballRosterScraper',
    'PlayerRecord',
    'RosterResult',
    'TeamInfo',
    'extract_roster',
    'extract_roster_from_html',
]
