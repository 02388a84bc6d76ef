import pytest
import requests
from bs4 import BeautifulSoup


ORIGIN = 'https://athletics.example.edu'
ROSTER_URL = f'{ORIGIN}/sports/football/roster'


TABLE_PAGE = """
<html>
<head>
  <title>2024 Football Roster - Lakeside University Athletics</title>
  <meta name="theme-color" content="#862633">
</head>
<body>
  <section class="roster-section">
    <h2>2024 Football Roster</h2>
    <table class="sidearm-table roster">
      <thead>
        <tr><th>#</th><th>Name</th><th>Pos.</th><th>Yr.</th><th>Ht.</th><th>Wt.</th><th>Hometown / High School</th></tr>
      </thead>
      <tbody>
        <tr><td>12</td><td><a href="/roster/player/99">Jane Doe</a></td><td>QB</td><td>So.</td><td>6-2</td><td>205</td><td>Dallas, TX / Jesuit</td></tr>
        <tr><td>4</td><td><a href="/roster/player/100">Marcus Hill</a></td><td>Wide Receiver</td><td>RS Junior</td><td>6-0</td><td>188</td><td>Tampa, FL / Plant</td></tr>
        <tr><td>55</td><td><a href="/roster/player/101">Owen Brooks</a></td><td>OL</td><td>Sr.</td><td>6-5</td><td>310</td><td>Akron, OH / Hoban</td></tr>
        <tr><td>21</td><td><a href="/roster/player/102">Tyler Reed</a></td><td>CB</td><td>Fr.</td><td>5-11</td><td>180</td><td>Macon, GA / Central</td></tr>
        <tr><td>90</td><td><a href="/roster/player/103">Luis Ortega</a></td><td>DL/LB</td><td>Gr.</td><td>6-3</td><td>275</td><td>El Paso, TX / Franklin</td></tr>
        <tr><td>2</td><td><a href="https://athletics.example.edu/roster/player/104">Kevin Shaw</a></td><td>S</td><td>Jr.</td><td>6-1</td><td>196</td><td>Provo, UT / Timpview</td></tr>
      </tbody>
    </table>
  </section>
  <section id="coaching-staff">
    <h2>Coaching Staff</h2>
    <table>
      <tbody>
        <tr><td><a href="/roster/coaches/1">Pat Moore</a></td><td>Head Coach</td><td>5th Season</td></tr>
        <tr><td><a href="/roster/coaches/2">Dana Wells</a></td><td>Offensive Coordinator</td><td>2nd Season</td></tr>
        <tr><td><a href="/roster/coaches/3">Chris Lane</a></td><td>Defensive Coordinator</td><td>1st Season</td></tr>
        <tr><td><a href="/roster/coaches/4">Sam Ford</a></td><td>Special Teams Coordinator</td><td>3rd Season</td></tr>
        <tr><td><a href="/roster/coaches/5">Jo Park</a></td><td>Director of Operations</td><td>4th Season</td></tr>
      </tbody>
    </table>
  </section>
</body>
</html>
"""

CARD_PAGE = """
<html>
<head>
  <title>Football Roster</title>
  <meta property="og:site_name" content="Hillcrest College Athletics">
</head>
<body>
  <div class="roster-grid">
    <div class="s-person-card">
      <div class="s-person-card__header__jersey-number">7</div>
      <h3><a href="/sports/football/roster/alex-carter/201">Alex Carter</a></h3>
      <div class="s-person-details__bio-stats">
        <span class="s-person-details__bio-stats-item">Position WR</span>
        <span class="s-person-details__bio-stats-item">Academic Year Jr.</span>
        <span class="s-person-details__bio-stats-item">Height 6-1</span>
        <span class="s-person-details__bio-stats-item">Weight 190 lbs</span>
      </div>
      <div class="s-person-card__content__person__location-item">Hometown Austin, Texas</div>
      <div class="s-person-card__content__person__location-item">Last School Westlake</div>
    </div>
    <div class="s-person-card">
      <h3><a href="/sports/football/roster/ben-ortiz/202">Ben Ortiz</a></h3>
      <p>#44 LB So. 6-0 225 lbs</p>
    </div>
    <div class="s-person-card">
      <h3><a href="/sports/football/roster/sam-hill/203">Sam Hill</a></h3>
      <span class="s-person-details__bio-stats-item">Position Offensive Coordinator</span>
    </div>
    <div class="s-person-card">
      <h3><a href="/sports/football/roster/coaches/pat-lee/204">Pat Lee</a></h3>
      <p>Head Coach</p>
    </div>
  </div>
</body>
</html>
"""

LINK_PAGE = """
<html>
<head><title>Roster | Brookfield Tech</title></head>
<body>
  <ul>
    <li><a href="/sports/football/roster/player/carlos-vega">Carlos Vega</a> <span>#3 QB Fr.</span></li>
    <li><a href="/sports/football/roster/player/dev-patel">Dev Patel</a> <span>#81 TE Sr. 6-4 245 lbs</span></li>
    <li><a href="/sports/football/roster/coaches/dan-roe/20">Dan Roe</a> Head Coach</li>
    <li><a href="/news/2024/roster-announced">Roster Announced</a></li>
  </ul>
</body>
</html>
"""

EMPTY_PAGE = """
<html>
<head><title>Page Not Found</title></head>
<body>
  <p>Nothing to see here.</p>
  <a href="/about">About Us</a>
</body>
</html>
"""


def parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, 'lxml')


@pytest.fixture
def make_soup():
    return parse


@pytest.fixture
def table_soup():
    return parse(TABLE_PAGE)


@pytest.fixture
def card_soup():
    return parse(CARD_PAGE)


@pytest.fixture
def link_soup():
    return parse(LINK_PAGE)


@pytest.fixture
def empty_soup():
    return parse(EMPTY_PAGE)


class StubResponse:
    """Just enough of requests.Response for the scraper."""

    def __init__(self, text: str, url: str, status_code: int = 200):
        self.text = text
        self.url = url
        self.status_code = status_code
        self.content = text.encode('utf-8')

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}", response=self)


class StubSession:
    """
    Stands in for requests.Session.

    pages maps a URL to an HTML string, a StubResponse, or an exception
    instance to raise.
    """

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({'url': url, 'headers': headers, 'timeout': timeout})
        page = self.pages.get(url)
        if page is None:
            return StubResponse('Not Found', url, status_code=404)
        if isinstance(page, Exception):
            raise page
        if isinstance(page, StubResponse):
            return page
        return StubResponse(page, url)


@pytest.fixture
def stub_session():
    return StubSession
