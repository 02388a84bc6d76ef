import pytest

from config.settings import TestingConfig
from scrapers.exceptions import FetchFailure, NoRosterFound
from scrapers.football.extractor import extract_roster_from_html
from web.app import create_app

from conftest import ROSTER_URL, TABLE_PAGE


class FakeRosterService:
    """Returns a canned result or raises a canned error."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def scrape(self, url, render=False):
        self.calls.append((url, render))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def use_service(monkeypatch):
    def install(**kwargs):
        fake = FakeRosterService(**kwargs)
        monkeypatch.setattr('web.routes.api.roster_service', fake)
        return fake
    return install


def test_scrape_returns_team_and_roster(client, use_service):
    fake = use_service(result=extract_roster_from_html(TABLE_PAGE, ROSTER_URL))

    response = client.post('/api/scrape', json={'url': ROSTER_URL, 'render': True})

    assert response.status_code == 200
    data = response.get_json()
    assert data['team']['name'] == 'Lakeside University'
    assert len(data['roster']) == 6
    assert data['roster'][0]['name'] == 'Jane Doe'
    assert fake.calls == [(ROSTER_URL, True)]
    assert response.headers['Access-Control-Allow-Origin'] == '*'


@pytest.mark.parametrize('body', [{}, {'url': ''}, {'url': 'ftp://example.edu/roster'}])
def test_scrape_rejects_missing_or_non_http_url(client, use_service, body):
    fake = use_service()
    response = client.post('/api/scrape', json=body)

    assert response.status_code == 400
    assert response.get_json() == {'error': 'URL is required'}
    assert fake.calls == []


def test_no_roster_is_a_client_error_with_suggestion(client, use_service):
    use_service(error=NoRosterFound(ROSTER_URL))
    response = client.post('/api/scrape', json={'url': ROSTER_URL})

    assert response.status_code == 400
    data = response.get_json()
    assert 'Could not find roster data' in data['error']
    assert data['suggestion'] == 'Try using the manual import option instead.'


def test_fetch_failure_is_a_bad_gateway(client, use_service):
    use_service(error=FetchFailure(ROSTER_URL, 'HTTP 403', status_code=403))
    response = client.post('/api/scrape', json={'url': ROSTER_URL})

    assert response.status_code == 502
    assert 'HTTP 403' in response.get_json()['error']


def test_unexpected_error_is_a_server_error(client, use_service):
    use_service(error=RuntimeError('boom'))
    response = client.post('/api/scrape', json={'url': ROSTER_URL})

    assert response.status_code == 500
    assert 'boom' in response.get_json()['error']


def test_preflight_and_wrong_method(client):
    preflight = client.options('/api/scrape')
    assert preflight.status_code == 200
    assert preflight.headers['Access-Control-Allow-Methods'] == 'GET, POST, OPTIONS'

    response = client.get('/api/scrape')
    assert response.status_code == 405
    assert response.get_json() == {'error': 'Method not allowed'}


def test_health_and_unknown_route(client):
    assert client.get('/api/health').get_json() == {'status': 'ok'}

    response = client.get('/nope')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Not found'}
