"""
Scraper Exceptions
==================

Error taxonomy for roster extraction.

- FetchFailure: the page could not be retrieved (network error, non-2xx
  status, headless browser failure). Surfaced to the caller unchanged.
- NoRosterFound: every extraction strategy came back empty. The page layout
  was not recognized; this is never reported as an empty roster.
- PartialRecordSkipped: a single row or card failed field extraction. It is
  logged and counted by the strategy, never raised out of it.
"""

from typing import Optional, Dict


MANUAL_IMPORT_SUGGESTION = 'Try using the manual import option instead.'


class ExtractionError(Exception):
    """Base class for errors reported back to roster scraper callers."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def to_dict(self) -> Dict[str, str]:
        payload = {'error': self.message}
        if self.suggestion:
            payload['suggestion'] = self.suggestion
        return payload


class FetchFailure(ExtractionError):
    """The roster page could not be retrieved."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        super().__init__(
            f"Failed to fetch {url}: {reason}",
            suggestion=(
                'The site may block automated requests or use JavaScript rendering. '
                + MANUAL_IMPORT_SUGGESTION
            ),
        )
        self.url = url
        self.reason = reason
        self.status_code = status_code


class NoRosterFound(ExtractionError):
    """No extraction strategy recognized the page layout."""

    def __init__(self, url: str):
        super().__init__(
            'Could not find roster data on this page. The site may use '
            'JavaScript rendering or have a different structure.',
            suggestion=MANUAL_IMPORT_SUGGESTION,
        )
        self.url = url


class PartialRecordSkipped(ExtractionError):
    """One row or card could not be turned into a player record."""

    def __init__(self, strategy: str, index: int, cause: Exception):
        super().__init__(
            f"{strategy}: skipped entry #{index} ({type(cause).__name__}: {cause})"
        )
        self.strategy = strategy
        self.index = index
        self.cause = cause
