from scrapers.football.strategies.columns import HEADER, POSITIONAL, classify_columns, find_header_row, map_header
from scrapers.football.strategies.base import body_rows, find_candidate_tables
from scrapers.football.strategies.header_table import extract_header_mapped_table


def rows_html(rows):
    return ''.join('<tr>' + ''.join(f'<td>{cell}</td>' for cell in row) + '</tr>' for row in rows)


PLAYERS = [
    ('12', '<a href="/roster/player/99">Jane Doe</a>', 'QB', 'So.'),
    ('4', '<a href="/roster/player/100">Marcus Hill</a>', 'WR', 'Jr.'),
    ('55', '<a href="/roster/player/101">Owen Brooks</a>', 'OL', 'Sr.'),
    ('21', '<a href="/roster/player/102">Tyler Reed</a>', 'CB', 'Fr.'),
    ('90', '<a href="/roster/player/103">Luis Ortega</a>', 'DL', 'Gr.'),
]


def test_reads_every_row_of_a_headed_table(table_soup):
    records = extract_header_mapped_table(table_soup)

    assert [r.name for r in records] == [
        'Jane Doe', 'Marcus Hill', 'Owen Brooks', 'Tyler Reed', 'Luis Ortega', 'Kevin Shaw',
    ]
    jane = records[0]
    assert jane.number == 12
    assert jane.position == 'QB'
    assert jane.year == 'So.'
    assert jane.height == '6-2'
    assert jane.weight == '205'
    assert jane.hometown == 'Dallas, TX'
    assert jane.high_school == 'Jesuit'
    assert jane.url == '/roster/player/99'


def test_staff_table_is_not_a_candidate(table_soup):
    tables = find_candidate_tables(table_soup)
    assert len(tables) == 1
    assert 'roster' in tables[0]['class']


def test_header_synonyms(make_soup):
    soup = make_soup(
        '<table><tr><th>No.</th><th>Full Name</th><th>Position</th><th>Cl.</th>'
        '<th>Hometown/Previous School</th><th>Last School</th></tr></table>',
    )
    mapping = map_header(soup.find('tr'))
    assert mapping == {
        'number': 0,
        'name': 1,
        'position': 2,
        'year': 3,
        'hometown': 4,
        'previous_school': 5,
    }


def test_small_tables_are_skipped(make_soup):
    soup = make_soup(
        '<table><thead><tr><th>#</th><th>Name</th><th>Pos</th><th>Yr</th></tr></thead>'
        f'<tbody>{rows_html(PLAYERS[:4])}</tbody></table>'
    )
    assert extract_header_mapped_table(soup) == []


def test_headerless_table_uses_positional_layout(make_soup):
    soup = make_soup(f'<table><tbody>{rows_html(PLAYERS)}</tbody></table>')
    table = soup.find('table')
    header = find_header_row(table)
    assert header is None

    column_map = classify_columns(header, body_rows(table, header))
    assert column_map.source == POSITIONAL
    assert column_map.index('name') == 1

    records = extract_header_mapped_table(soup)
    assert [(r.number, r.name, r.position, r.year) for r in records][:2] == [
        (12, 'Jane Doe', 'QB', 'So.'),
        (4, 'Marcus Hill', 'WR', 'Jr.'),
    ]


def test_misleading_column_is_dropped_and_scanned(make_soup):
    # "Yr." actually holds heights, the class year sits in the last column
    rows = [(num, name, pos, '6-1', year) for num, name, pos, year in PLAYERS]
    soup = make_soup(
        '<table><thead><tr><th>#</th><th>Name</th><th>Pos</th><th>Yr.</th><th>Notes</th></tr></thead>'
        f'<tbody>{rows_html(rows)}</tbody></table>'
    )
    table = soup.find('table')
    header = find_header_row(table)
    column_map = classify_columns(header, body_rows(table, header))

    assert column_map.source == HEADER
    assert column_map.index('year') is None

    records = extract_header_mapped_table(soup)
    assert [r.year for r in records] == ['So.', 'Jr.', 'Sr.', 'Fr.', 'Gr.']
    assert all(r.height == '6-1' for r in records)


def test_name_read_shifts_to_profile_link(make_soup):
    rows = [list(row) for row in PLAYERS]
    # Photo cell pushed the name one column right in this row only
    rows[2] = ['55', '<img src="/img/ob.jpg">', '<a href="/roster/player/101">Owen Brooks</a>', 'OL']
    soup = make_soup(
        '<table><thead><tr><th>#</th><th>Name</th><th>Pos</th><th>Yr</th></tr></thead>'
        f'<tbody>{rows_html(rows)}</tbody></table>'
    )
    records = extract_header_mapped_table(soup)

    assert len(records) == 5
    assert records[2].name == 'Owen Brooks'
    assert records[2].url == '/roster/player/101'


def test_unreliable_name_column_falls_back_to_row_scan(make_soup):
    # Every row has a leading photo cell the header does not account for
    rows = [('<img src="/p.jpg">',) + row for row in PLAYERS]
    soup = make_soup(
        '<table><thead><tr><th>#</th><th>Name</th><th>Pos</th><th>Yr</th></tr></thead>'
        f'<tbody>{rows_html(rows)}</tbody></table>'
    )
    records = extract_header_mapped_table(soup)

    assert [(r.number, r.name, r.position) for r in records] == [
        (12, 'Jane Doe', 'QB'),
        (4, 'Marcus Hill', 'WR'),
        (55, 'Owen Brooks', 'OL'),
        (21, 'Tyler Reed', 'CB'),
        (90, 'Luis Ortega', 'DL'),
    ]


def test_staff_rows_inside_roster_table_are_skipped(make_soup):
    soup = make_soup(
        '<table class="roster"><thead><tr><th>#</th><th>Name</th><th>Pos</th><th>Yr</th></tr></thead>'
        f'<tbody>{rows_html(PLAYERS)}'
        '<tr class="staff-row"><td></td><td><a href="/roster/coaches/1">Pat Moore</a></td><td>Head Coach</td><td></td></tr>'
        '<tr><td></td><td>Dana Wells</td><td>Offensive Coordinator</td><td></td></tr>'
        '</tbody></table>'
    )
    names = [r.name for r in extract_header_mapped_table(soup)]
    assert 'Pat Moore' not in names
    assert 'Dana Wells' not in names
    assert len(names) == 5
