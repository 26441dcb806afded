import re

import pytest

from bbsctl.render import Color, Table, bold, paint, set_colors_enabled, to_json


@pytest.fixture
def no_colors():
    set_colors_enabled(False)
    yield
    set_colors_enabled(True)


@pytest.fixture
def colors():
    set_colors_enabled(True)
    yield
    set_colors_enabled(True)


def test_instances_table(no_colors):
    table = Table(["Url", "Secret"])
    table.append_row(["http://localhost/bigbluebutton", "secret"])
    expected = "Url                             Secret  \nhttp://localhost/bigbluebutton  secret"
    assert table.render().strip() == expected


def test_numeric_column_is_right_aligned(no_colors):
    table = Table(["Hostname", "Instances"])
    table.append_row(["localhost", 1])
    expected = "Hostname   Instances  \nlocalhost          1"
    assert table.render().strip() == expected


def test_mixed_column_is_left_aligned(no_colors):
    table = Table()
    table.append_row([bold("BigBlueSwarm API"), paint("Up", Color.HI_GREEN)])
    table.append_row([bold("Active tenants"), 1])
    table.append_row([bold("Active meetings"), 1])
    table.append_row([bold("Active participants"), 10])
    expected = (
        "BigBlueSwarm API     Up  \n"
        "Active tenants       1   \n"
        "Active meetings      1   \n"
        "Active participants  10  "
    )
    assert table.render() == expected


def test_cluster_table_with_title_header(no_colors):
    table = Table(
        [bold(name) for name in
         ["API", "Host", "CPU", "Mem", "Active meetings", "Active participants"]]
    )
    table.append_row(["Up", "http://localhost/bigbluebutton", "8.32 %", "55.36 %", 1, 10])
    expected = (
        "API  Host                            CPU     Mem      Active Meetings  Active Participants  \n"
        "Up   http://localhost/bigbluebutton  8.32 %  55.36 %                1                   10"
    )
    assert table.render().strip() == expected


def test_colors_do_not_change_alignment(colors):
    table = Table(["API", "Host"])
    table.append_row([paint("Up", Color.HI_GREEN), "localhost"])
    table.append_row([paint("Down", Color.HI_RED), "remote"])
    colored = table.render()
    set_colors_enabled(False)
    plain_table = Table(["API", "Host"])
    plain_table.append_row(["Up", "localhost"])
    plain_table.append_row(["Down", "remote"])
    assert re.sub(r"\x1b\[[0-9;]*m", "", colored) == plain_table.render()


def test_paint_wraps_with_escape_codes(colors):
    assert paint("Up", Color.HI_GREEN) == "\x1b[92mUp\x1b[0m"
    assert bold("API") == "\x1b[1mAPI\x1b[0m"


def test_paint_without_colors(no_colors):
    assert paint("Down", Color.HI_RED) == "Down"


def test_csv_instances():
    table = Table(["Url", "Secret"])
    table.append_row(["http://localhost/bigbluebutton", "secret"])
    assert table.render_csv() == "Url,Secret\nhttp://localhost/bigbluebutton,secret"


def test_csv_tenants():
    table = Table(["Hostname", "Instances"])
    table.append_row(["localhost", 1])
    assert table.render_csv() == "Hostname,Instances\nlocalhost,1"


def test_empty_table_renders_nothing():
    assert Table().render() == ""


def test_to_json_indentation():
    value = [{"url": "http://localhost/bigbluebutton", "secret": "secret"}]
    expected = (
        '[\n  {\n    "url": "http://localhost/bigbluebutton",\n'
        '    "secret": "secret"\n  }\n]'
    )
    assert to_json(value) == expected


def test_to_json_escapes_html():
    assert to_json("<a&b>") == '"\\u003ca\\u0026b\\u003e"'


def test_to_json_empty_list():
    assert to_json([]) == "[]"