"""
Roster Service Module
=====================

Business logic around the roster scraper: scrape one team, scrape a list of
teams, re-parse saved HTML and write the results to disk. The web routes and
the command-line interface both go through this class.

For Junior Developers:
---------------------
The "service layer" keeps the routes and CLI commands thin. They only deal
with their own transport (HTTP requests, command-line arguments); everything
else lives here and can be tested without a web server.

Usage:
    from services.roster_service import RosterService

    service = RosterService()

    # Scrape one roster
    result = service.scrape('https://gohuskies.com/sports/football/roster')

    # Save team.json and roster.json
    team_path, roster_path = service.save(result)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from loguru import logger

from config.settings import Config
from scrapers.exceptions import ExtractionError
from scrapers.football.extractor import extract_roster_from_html
from scrapers.football.models import RosterResult
from scrapers.football.roster_scraper import FootballRosterScraper


class RosterService:
    """
    Service class for roster scraping operations.

    Attributes:
        scraper: FootballRosterScraper used for every fetch
        logger: Logger for this service
    """

    def __init__(
        self,
        scraper: Optional[FootballRosterScraper] = None,
        delay_seconds: Optional[float] = None
    ):
        """
        Initialize the roster service.

        Args:
            scraper: Optional scraper (creates one if not provided)
            delay_seconds: Pause between batch pages, applied through the
                scraper's rate limit (defaults to Config.SCRAPE_DELAY_SECONDS)
        """
        self.scraper = scraper or FootballRosterScraper()
        if delay_seconds is not None:
            self.scraper.delay_seconds = delay_seconds
        self.logger = logger.bind(service='RosterService')

    def scrape(self, url: str, render: bool = False) -> RosterResult:
        """
        Scrape one roster page.

        Raises:
            FetchFailure: The page could not be loaded
            NoRosterFound: The page layout was not recognized
        """
        self.logger.info(f"Scraping roster: {url}")
        return self.scraper.scrape(url=url, render=render)

    def scrape_many(self, urls: Iterable[str], render: bool = False) -> List[Dict[str, Any]]:
        """
        Scrape several roster pages one after another.

        A failure on one page is recorded in its summary and the batch moves
        on to the next URL.

        Returns:
            One summary per URL:
            {'url', 'status': 'success', 'team', 'players', 'result'} or
            {'url', 'status': 'failed', 'error', 'error_type', 'suggestion'}
        """
        summaries = []
        urls = [url for url in urls if url]

        for i, url in enumerate(urls):
            if i > 0:
                self.scraper._rate_limit()

            try:
                result = self.scrape(url, render=render)
            except ExtractionError as e:
                self.logger.warning(f"Skipping {url}: {e.message}")
                summaries.append({
                    'url': url,
                    'status': 'failed',
                    'error': e.message,
                    'error_type': type(e).__name__,
                    'suggestion': e.suggestion,
                })
                continue
            except Exception as e:
                self.logger.error(f"Unexpected error scraping {url}: {type(e).__name__}: {e}")
                summaries.append({
                    'url': url,
                    'status': 'failed',
                    'error': f"{type(e).__name__}: {e}",
                    'error_type': type(e).__name__,
                    'suggestion': None,
                })
                continue

            summaries.append({
                'url': url,
                'status': 'success',
                'team': result.team.name,
                'players': len(result.roster),
                'result': result,
            })

        succeeded = sum(1 for summary in summaries if summary['status'] == 'success')
        self.logger.info(f"Batch complete: {succeeded}/{len(summaries)} rosters scraped")
        return summaries

    def parse_html(self, html: str, url: str) -> RosterResult:
        """
        Extract a roster from HTML saved earlier (e.g. page-debug.html).

        Raises:
            NoRosterFound: The page layout was not recognized
        """
        self.logger.info(f"Parsing saved HTML for {url}")
        return extract_roster_from_html(html, url)

    def save(self, result: RosterResult, output_dir: Optional[Path] = None) -> Tuple[Path, Path]:
        """
        Write team.json and roster.json.

        Args:
            result: The roster to save
            output_dir: Target directory (defaults to Config.OUTPUT_DIR)

        Returns:
            (team file path, roster file path)
        """
        output_dir = Path(output_dir or Config.OUTPUT_DIR)
        output_dir.mkdir(parents=True, exist_ok=True)

        team_path = output_dir / Config.TEAM_FILENAME
        roster_path = output_dir / Config.ROSTER_FILENAME

        team_path.write_text(json.dumps(result.team.to_dict(), indent=2), encoding='utf-8')
        roster_path.write_text(json.dumps(result.roster_dicts(), indent=2), encoding='utf-8')

        self.logger.info(f"Saved {len(result.roster)} players to {roster_path}")
        return team_path, roster_path
