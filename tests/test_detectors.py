import pytest

from scrapers.football.detectors import (
    find_height,
    find_jersey_number,
    find_position,
    find_weight,
    find_year,
    is_coach_position,
    is_in_staff_section,
    is_valid_player_name,
    looks_like_hometown,
    looks_like_player_name,
    looks_like_school_name,
    match_number_cell,
    match_position_cell,
    parse_jersey_number,
    split_hometown_line,
)


@pytest.mark.parametrize('text', ['Jane Doe', "D'Andre O'Neal-Smith", 'JOHN SMITH', 'Bo Jackson'])
def test_player_names_accepted(text):
    assert looks_like_player_name(text)


@pytest.mark.parametrize('text', [
    '',
    'Jo',
    'jane doe',
    'Full Bio',
    'Roster',
    'Assistant Coach',
    '123',
    'ATH',
    'DL/LB',
    'Sophomore',
    '6-2',
    'A Name With Far Too Many Words',
    'X' * 51,
])
def test_non_names_rejected(text):
    assert not looks_like_player_name(text)


@pytest.mark.parametrize('text', [
    'Jesuit High School',
    'Plant HS',
    'IMG Academy',
    'Bishop Gorman Prep',
    'St. Thomas Aquinas, FL',
])
def test_school_names(text):
    assert looks_like_school_name(text)
    assert not is_valid_player_name(text)


def test_person_is_not_a_school():
    assert not looks_like_school_name('Jane Doe')
    assert is_valid_player_name('Jane Doe')


def test_coach_positions():
    assert is_coach_position('Offensive Coordinator')
    assert is_coach_position('Director of Football Operations')
    assert not is_coach_position('WR')
    assert not is_coach_position('')
    assert not is_coach_position(None)


def test_staff_section_detected_by_class_and_heading(make_soup):
    soup = make_soup("""
        <div class="coaching-staff"><ul><li><a id="coach">Pat Moore</a></li></ul></div>
        <section><h2>Support Staff</h2><p><a id="trainer">Lee Roy</a></p></section>
        <section><h2>2024 Roster</h2><ul><li><a id="player">Jane Doe</a></li></ul></section>
    """)
    assert is_in_staff_section(soup.find(id='coach'))
    assert is_in_staff_section(soup.find(id='trainer'))
    assert not is_in_staff_section(soup.find(id='player'))


def test_staff_section_walk_is_depth_limited(make_soup):
    soup = make_soup('<div class="staff-directory"><div><div><div><a id="deep">Jane Doe</a></div></div></div></div>')
    deep = soup.find(id='deep')
    assert is_in_staff_section(deep)
    assert not is_in_staff_section(deep, depth=2)


def test_position_cells():
    assert match_position_cell('WR') == 'WR'
    assert match_position_cell('dl / lb') == 'dl / lb'
    assert match_position_cell('Wide Receiver') == 'Wide Receiver'
    assert match_position_cell('Jane Doe') == ''


def test_find_position_in_free_text():
    assert find_position('WR | 6-2 | 195 lbs') == 'WR'
    assert find_position('#9 EDGE R-Jr.') == 'EDGE'
    assert find_position("C.J. Stroud's profile") == ''


@pytest.mark.parametrize('text, expected', [
    ('So.', 'So.'),
    ('Redshirt Junior', 'Redshirt Junior'),
    ('R-Fr.', 'R-Fr.'),
    ('RS Sr.', 'RS Sr.'),
    ('Graduate Student', 'Graduate Student'),
    ('#4 WR Jr. 6-1', 'Jr.'),
    ('5th Year', '5th Year'),
    ('Solomon', ''),
])
def test_find_year(text, expected):
    assert find_year(text) == expected


@pytest.mark.parametrize('text, expected', [
    ('6-2', '6-2'),
    ('5-11', '5-11'),
    ("6' 2\"", "6'2\""),
    ('Ht: 6-4 Wt: 230', '6-4'),
    ('16-20', ''),
    ('2-1', ''),
])
def test_find_height(text, expected):
    assert find_height(text) == expected


def test_find_weight():
    assert find_weight('215') == '215 lbs'
    assert find_weight('215', allow_bare=False) == ''
    assert find_weight('Weight: 198 lbs.') == '198 lbs'
    assert find_weight('6-1 190 lbs Austin, TX', allow_bare=False) == '190 lbs'
    assert find_weight('Jane Doe') == ''
    assert find_weight('Weight 230 LBS', allow_bare=False) == '230 lbs'


def test_linebacker_code_is_not_a_weight():
    assert find_weight('#44 LB So. 6-0 225 lbs', allow_bare=False) == '225 lbs'
    assert find_weight('44 LB Jr. 6-1', allow_bare=False) == ''


def test_jersey_numbers():
    assert match_number_cell('7')
    assert match_number_cell('#12')
    assert not match_number_cell('100')
    assert not match_number_cell('QB')

    assert parse_jersey_number('#12') == 12
    assert parse_jersey_number('7 ') == 7
    assert parse_jersey_number('') == 0
    assert parse_jersey_number(None) == 0

    assert find_jersey_number('Alex Carter #44 LB') == 44
    assert find_jersey_number('Jersey Number 23') == 23
    assert find_jersey_number('LB So. 6-0') == 0


def test_hometowns():
    assert looks_like_hometown('Dallas, TX')
    assert looks_like_hometown('Austin, Texas / Westlake')
    assert not looks_like_hometown('Jane Doe')
    assert not looks_like_hometown('Jesuit High School, TX')

    assert split_hometown_line('Dallas, TX / Jesuit') == ('Dallas, TX', 'Jesuit')
    assert split_hometown_line('Dallas, TX') == ('Dallas, TX', '')
    assert split_hometown_line('') == ('', '')


def test_staff_heading_inside_title_wrapper(make_soup):
    soup = make_soup("""
        <main>
          <section>
            <div class="section-title"><h2>Coaching Staff</h2></div>
            <div class="grid"><div class="card"><a id="coach" href="/people/1">Pat Moore</a></div></div>
          </section>
          <section>
            <h2>Support Staff</h2><p>Front office listing</p>
          </section>
          <section>
            <div class="grid"><div class="card"><a id="player" href="/roster/player/2">Jane Doe</a></div></div>
          </section>
        </main>
    """)
    assert is_in_staff_section(soup.find(id='coach'))
    assert not is_in_staff_section(soup.find(id='player'))
