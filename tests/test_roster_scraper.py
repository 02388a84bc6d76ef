import pytest
import requests

from scrapers.exceptions import FetchFailure, NoRosterFound
from scrapers.football import renderer
from scrapers.football.roster_scraper import FootballRosterScraper

from conftest import EMPTY_PAGE, ROSTER_URL, TABLE_PAGE, StubResponse


def test_scrape_resolves_links_against_final_url(stub_session):
    final_url = 'https://www.lakeside.edu/sports/football/roster'
    session = stub_session({ROSTER_URL: StubResponse(TABLE_PAGE, final_url)})
    scraper = FootballRosterScraper(session=session)

    result = scraper.scrape(url=ROSTER_URL)

    assert len(result.roster) == 6
    assert result.roster[0].url == 'https://www.lakeside.edu/roster/player/99'
    assert result.team.roster_url == final_url
    assert scraper.last_page.origin == 'https://www.lakeside.edu'


def test_requests_look_like_a_browser(stub_session):
    session = stub_session({ROSTER_URL: TABLE_PAGE})
    FootballRosterScraper(session=session).scrape(url=ROSTER_URL)

    [call] = session.calls
    assert call['headers']['User-Agent']
    assert call['timeout'] > 0


def test_http_error_is_a_fetch_failure(stub_session):
    scraper = FootballRosterScraper(session=stub_session({}))

    with pytest.raises(FetchFailure) as excinfo:
        scraper.scrape(url=ROSTER_URL)

    assert excinfo.value.status_code == 404
    assert excinfo.value.url == ROSTER_URL


def test_connection_error_is_a_fetch_failure(stub_session):
    session = stub_session({ROSTER_URL: requests.ConnectionError('connection refused')})
    scraper = FootballRosterScraper(session=session)

    with pytest.raises(FetchFailure) as excinfo:
        scraper.scrape(url=ROSTER_URL)

    assert excinfo.value.status_code is None
    assert 'connection refused' in excinfo.value.message


def test_timeout_is_a_fetch_failure(stub_session):
    session = stub_session({ROSTER_URL: requests.Timeout('read timed out')})
    with pytest.raises(FetchFailure, match='timed out'):
        FootballRosterScraper(session=session).scrape(url=ROSTER_URL)


def test_scrape_requires_url(stub_session):
    with pytest.raises(ValueError):
        FootballRosterScraper(session=stub_session({})).scrape()


def test_run_reports_success(stub_session):
    scraper = FootballRosterScraper(session=stub_session({ROSTER_URL: TABLE_PAGE}))
    outcome = scraper.run(url=ROSTER_URL)

    assert outcome['status'] == 'success'
    assert outcome['records_processed'] == 6
    assert outcome['pages_fetched'] == 1
    assert outcome['result'].strategy == 'header_table'


def test_run_reports_no_roster_with_suggestion(stub_session):
    scraper = FootballRosterScraper(session=stub_session({ROSTER_URL: EMPTY_PAGE}))
    outcome = scraper.run(url=ROSTER_URL)

    assert outcome['status'] == 'failed'
    assert outcome['error_type'] == NoRosterFound.__name__
    assert outcome['suggestion'] == 'Try using the manual import option instead.'
    assert scraper.last_page is not None


def test_run_reports_fetch_failure(stub_session):
    outcome = FootballRosterScraper(session=stub_session({})).run(url=ROSTER_URL)

    assert outcome['status'] == 'failed'
    assert outcome['error_type'] == 'FetchFailure'
    assert outcome['errors'] == [f'HTTP 404: {ROSTER_URL}']


def test_render_uses_headless_browser(stub_session, monkeypatch):
    rendered = []

    def fake_render(url, user_agent):
        rendered.append(url)
        return TABLE_PAGE, url

    monkeypatch.setattr('scrapers.football.roster_scraper.render_page', fake_render)
    session = stub_session({})
    scraper = FootballRosterScraper(session=session)

    result = scraper.scrape(url=ROSTER_URL, render=True)

    assert rendered == [ROSTER_URL]
    assert session.calls == []
    assert len(result.roster) == 6


def test_render_without_selenium_is_a_fetch_failure(monkeypatch):
    monkeypatch.setattr(renderer, 'SELENIUM_AVAILABLE', False)

    with pytest.raises(FetchFailure, match='Selenium'):
        renderer.render_page(ROSTER_URL)


def test_browser_setup_error_is_a_fetch_failure(monkeypatch):
    pytest.importorskip('selenium')

    def no_driver(user_agent):
        raise ValueError('Could not get version for Chrome')

    monkeypatch.setattr(renderer, 'SELENIUM_AVAILABLE', True)
    monkeypatch.setattr(renderer, 'create_driver', no_driver)

    with pytest.raises(FetchFailure, match='setup failed'):
        renderer.render_page(ROSTER_URL)
