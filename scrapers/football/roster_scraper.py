"""
Football Roster Scraper
=======================

Fetches a team's football roster page and runs the roster extractor on it.

Pages are loaded with a plain HTTP GET by default. Rosters that only appear
after JavaScript runs can be loaded through headless Chrome instead
(render=True, needs the optional Selenium extra).

Usage:
    from scrapers.football import FootballRosterScraper

    scraper = FootballRosterScraper()
    result = scraper.scrape(url='https://gohuskies.com/sports/football/roster')
    print(result.team.name, len(result.roster))
"""

from dataclasses import dataclass
from typing import Optional

import requests
from bs4 import BeautifulSoup

from scrapers.base_scraper import BaseScraper
from scrapers.football.extractor import extract_roster, page_origin
from scrapers.football.models import RosterResult
from scrapers.football.renderer import render_page


@dataclass
class FetchedPage:
    """A loaded roster page, ready for extraction."""
    soup: BeautifulSoup
    html: str
    final_url: str

    @property
    def origin(self) -> str:
        return page_origin(self.final_url)


class FootballRosterScraper(BaseScraper):
    """
    Scraper for a single football roster page.

    Any athletics site is accepted: the extractor works out the page layout
    on its own, so there is no per-site configuration.

    Attributes:
        last_page: The most recently loaded page (kept so callers can save
            the HTML for debugging)
    """

    def __init__(self, session: Optional[requests.Session] = None):
        super().__init__('football', session=session)
        self.last_page: Optional[FetchedPage] = None

    def load_document(self, url: str, render: bool = False) -> FetchedPage:
        """
        Load a roster page.

        Args:
            url: Roster page URL
            render: Run the page's JavaScript in headless Chrome first

        Returns:
            FetchedPage with the parsed document and the URL it ended up at

        Raises:
            FetchFailure: When the page cannot be retrieved
        """
        if render:
            html, final_url = render_page(url, self.user_agent)
            self._stats['pages_fetched'] += 1
        else:
            response = self.fetch(url)
            html, final_url = response.text, response.url or url

        page = FetchedPage(
            soup=BeautifulSoup(html, 'lxml'),
            html=html,
            final_url=final_url,
        )
        self.last_page = page
        return page

    def scrape(self, url: str = None, render: bool = False, **kwargs) -> RosterResult:
        """
        Load a roster page and extract its team and players.

        Args:
            url: Roster page URL
            render: Load the page through headless Chrome

        Returns:
            RosterResult

        Raises:
            FetchFailure: The page could not be loaded
            NoRosterFound: No player could be extracted from the page
        """
        if not url:
            raise ValueError('A roster URL is required')

        page = self.load_document(url, render=render)
        self.logger.info(f"Loaded {page.final_url} ({len(page.html)} chars)")

        result = extract_roster(page.soup, page.final_url)
        self._stats['records_processed'] = len(result.roster)
        return result
