"""
Base Scraper Module
===================

This module provides the abstract base class for the roster scrapers.
It handles common functionality like:
- HTTP request management with retries
- Rate limiting to be respectful to source websites
- Logging of all scraping operations
- Turning failures into a result dictionary for command-line use

For Junior Developers:
---------------------
When creating a new scraper, you inherit from BaseScraper and implement
scrape(). The base class handles the "plumbing" so you can focus on the
actual extraction logic.

Example:
    class FootballRosterScraper(BaseScraper):
        def scrape(self, url=None, **kwargs):
            response = self.fetch(url)
            ...

Design Pattern Used: Template Method Pattern
    The BaseScraper defines the skeleton of the scraping algorithm,
    and subclasses fill in the specific implementation details.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
import time
import traceback

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from loguru import logger

from config.settings import Config
from scrapers.exceptions import ExtractionError, FetchFailure


class BaseScraper(ABC):
    """
    Abstract base class for roster scrapers.

    Attributes:
        source_name (str): Short label used in log lines (e.g., 'football')
        session (requests.Session): Reusable HTTP session with retry logic
        delay_seconds (float): Pause applied by _rate_limit()
        timeout (int): Per-request timeout in seconds

    For Junior Developers:
    ---------------------
    Think of this class as a "template" for scrapers. You don't use it directly,
    but you create new classes that inherit from it. The @abstractmethod decorator
    means "any class that inherits from me MUST implement this method."

    Methods you MUST implement in subclasses:
    - scrape(): The main scraping logic

    Methods you CAN override if needed:
    - get_headers(): Custom HTTP headers
    """

    def __init__(self, source_name: str, session: Optional[requests.Session] = None):
        """
        Initialize the scraper.

        Args:
            source_name: Short label for log lines
            session: Pre-built HTTP session (tests pass a stub); a retrying
                session is created when omitted
        """
        self.source_name = source_name

        # Create an HTTP session with retry logic
        self.session = session if session is not None else self._create_session()

        self.delay_seconds = Config.SCRAPE_DELAY_SECONDS
        self.user_agent = Config.USER_AGENT
        self.timeout = Config.REQUEST_TIMEOUT

        self._stats = self._empty_stats()

        self.logger = logger.bind(
            scraper=self.__class__.__name__,
            source=self.source_name
        )

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            'pages_fetched': 0,
            'records_processed': 0,
            'errors': []
        }

    def _create_session(self) -> requests.Session:
        """
        Create an HTTP session with automatic retry logic.

        Returns:
            A configured requests.Session object

        For Junior Developers:
        ---------------------
        A "session" is like keeping a browser window open. It remembers
        cookies and other settings between requests, which is more efficient
        than opening a new connection every time.

        The retry strategy here means:
        - total=MAX_RETRIES: Try up to that many times
        - backoff_factor=1: Wait 1s, 2s, 4s between retries (exponential)
        - status_forcelist: Retry on these HTTP error codes

        This adapter is the only retry layer. The extractor never re-runs
        a fetch on its own.
        """
        session = requests.Session()

        retry_strategy = Retry(
            total=Config.MAX_RETRIES,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD", "GET", "OPTIONS"]
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def get_headers(self) -> Dict[str, str]:
        """
        Get HTTP headers for requests.

        Returns:
            Dictionary of HTTP headers

        For Junior Developers:
        ---------------------
        The User-Agent tells the website what browser/tool is making the request.
        Many athletics sites refuse requests that don't look like a browser.
        """
        return {
            'User-Agent': self.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.9',
            'Accept-Encoding': 'gzip, deflate, br',
            'Connection': 'keep-alive',
            'Upgrade-Insecure-Requests': '1',
        }

    def fetch(self, url: str, params: Optional[Dict] = None) -> requests.Response:
        """
        GET a URL and return the successful response.

        Args:
            url: The URL to fetch
            params: Optional query parameters

        Returns:
            The requests.Response (2xx)

        Raises:
            FetchFailure: On timeouts, connection errors and non-2xx statuses
        """
        self.logger.info(f"Fetching: {url}")

        try:
            response = self.session.get(
                url,
                params=params,
                headers=self.get_headers(),
                timeout=self.timeout
            )
            response.raise_for_status()

        except requests.Timeout:
            self.logger.error(f"Timeout fetching {url}")
            self._stats['errors'].append(f"Timeout: {url}")
            raise FetchFailure(url, f"timed out after {self.timeout}s")

        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            self.logger.error(f"HTTP error fetching {url}: {e}")
            self._stats['errors'].append(f"HTTP {status}: {url}")
            raise FetchFailure(url, f"HTTP {status}", status_code=status)

        except requests.RequestException as e:
            self.logger.error(f"Failed to fetch {url}: {str(e)}")
            self._stats['errors'].append(f"Request failed: {url} - {str(e)}")
            raise FetchFailure(url, str(e))

        self._stats['pages_fetched'] += 1
        self.logger.debug(f"Received {len(response.content)} bytes")
        return response

    def _rate_limit(self):
        """
        Wait between requests to be respectful to websites.

        For Junior Developers:
        ---------------------
        Rate limiting is CRITICAL when scraping many pages. Without it:
        1. You might get your IP blocked
        2. You could overload the server (which is rude)
        3. The website might think you're attacking them

        Always be a good internet citizen!
        """
        time.sleep(self.delay_seconds)

    @abstractmethod
    def scrape(self, **kwargs) -> Any:
        """
        Execute the scraping operation.

        This method MUST be implemented by every scraper class.

        Raises:
            ExtractionError: Subclasses raise FetchFailure / NoRosterFound
        """
        pass

    def run(self, **kwargs) -> Dict[str, Any]:
        """
        Run the scraper with full logging and error handling.

        This wraps scrape() and never raises: failures come back as a
        result dictionary with status 'failed'.

        Returns:
            {'status': 'success', 'result': ..., ...stats} or
            {'status': 'failed', 'error': ..., 'error_type': ...,
             'suggestion': ..., ...stats}

        Example:
            scraper = FootballRosterScraper()
            result = scraper.run(url='https://gohuskies.com/sports/football/roster')
            print(result['status'])
        """
        self._stats = self._empty_stats()

        try:
            result = self.scrape(**kwargs)

        except ExtractionError as e:
            self.logger.error(f"Scrape failed: {e.message}")
            return {
                'status': 'failed',
                'error': e.message,
                'error_type': type(e).__name__,
                'suggestion': e.suggestion,
                **self._stats,
            }

        except Exception as e:
            error_msg = f"{type(e).__name__}: {str(e)}"
            self.logger.error(f"Scrape failed: {error_msg}")
            self.logger.debug(f"Stack trace:\n{traceback.format_exc()}")
            return {
                'status': 'failed',
                'error': error_msg,
                'error_type': type(e).__name__,
                'suggestion': None,
                **self._stats,
                'errors': self._stats['errors'] + [error_msg],
            }

        self.logger.info(f"Scrape completed: {self._stats['records_processed']} records")
        return {
            'status': 'success',
            'result': result,
            **self._stats,
        }
