import io
import time
import unicodedata

import pytest

from hetapuz.defines import BORDER_OF_NUMERIC
from hetapuz.tools import (
    LINE_LENMAX,
    MYLINE_MAX,
    GameRandom,
    TextScreen,
    j_stamp,
    line_to_domain,
    line_to_domain_len,
    log_write,
    read_line,
    zen_int,
)


@pytest.fixture(scope="module")
def seeded_pair():
    return GameRandom(1234), GameRandom(1234)


def test_same_seed_same_sequence(seeded_pair):
    a, b = seeded_pair
    assert [a.get(1000) for _ in range(50)] == [b.get(1000) for _ in range(50)]


def test_reseed_restarts_sequence():
    rng = GameRandom(77)
    first = [rng.get(BORDER_OF_NUMERIC) for _ in range(10)]
    rng.reseed(77)
    assert [rng.get(BORDER_OF_NUMERIC) for _ in range(10)] == first


def test_get_bounds(seeded_pair):
    rng, _ = seeded_pair
    assert rng.get(0) == 0
    values = [rng.get(3) for _ in range(200)]
    assert set(values) <= {0, 1, 2, 3}
    with pytest.raises(ValueError):
        rng.get(-1)
    with pytest.raises(ValueError):
        rng.get(BORDER_OF_NUMERIC + 1)


def test_float_ranges(seeded_pair):
    rng, _ = seeded_pair
    for _ in range(200):
        assert 0.0 <= rng.krnd() < 1.0
        assert 0.0 <= rng.rnd() <= 1.0
        assert -1.0 <= rng.rndpm() <= 1.0
        assert rng.rndp1m1() in (-1, 1)


def test_rndbnd_bounds(seeded_pair):
    rng, _ = seeded_pair
    values = [rng.rndbnd(5, 9) for _ in range(300)]
    assert min(values) >= 5
    assert max(values) <= 9
    assert rng.rndbnd(4, 4) == 4


def test_shuffle_is_permutation(seeded_pair):
    rng, _ = seeded_pair
    items = list(range(20))
    rng.shuffle(items)
    assert sorted(items) == list(range(20))


def test_shuffle_empty_raises(seeded_pair):
    rng, _ = seeded_pair
    with pytest.raises(ValueError):
        rng.shuffle([])


def test_text_screen_fills_and_clears():
    screen = TextScreen()
    for n in range(MYLINE_MAX + 5):
        screen.print(f"row {n}")
    lines = screen.lines()
    assert len(lines) == MYLINE_MAX
    assert lines[0] == "row 0"
    screen.cls()
    assert screen.lines() == []


def test_read_line_sequence():
    stream = io.StringIO("abc\r\ndef\nghi", newline="")
    assert read_line(stream) == "abc"
    assert read_line(stream) == "def"
    assert read_line(stream) == "ghi"
    assert read_line(stream) == ""


def test_read_line_lone_cr_raises():
    stream = io.StringIO("a\rb", newline="")
    with pytest.raises(ValueError):
        read_line(stream)


def test_read_line_limits_length():
    stream = io.StringIO("x" * (LINE_LENMAX + 6) + "\n", newline="")
    assert read_line(stream) == "x" * LINE_LENMAX
    assert read_line(stream) == "x" * 6


def test_j_stamp_worked_example():
    ts = time.mktime((2010, 11, 25, 1, 2, 3, 0, 0, -1))
    assert j_stamp(ts) == "2010/11/25 01:02:03"


def test_j_stamp_matches_local_date():
    ts = time.time()
    local = time.localtime(ts)
    stamp = j_stamp(ts)
    assert stamp.startswith(time.strftime("%Y/%m/", local))
    assert stamp.endswith(time.strftime("%H:%M:%S", local))


def test_zen_int_negative():
    assert zen_int(-120) == "−１２０"


@pytest.mark.parametrize("value", [0, 7, 42, 1000000000])
def test_zen_int_round_trip(value):
    text = zen_int(value)
    assert unicodedata.normalize("NFKC", text) == str(value)
    assert len(text) == len(str(value))


def test_line_to_domain():
    assert line_to_domain("ab c/1.2") == "ab-c-1.2"
    assert line_to_domain("Server.example") == "Server.example"


def test_line_to_domain_len():
    assert line_to_domain_len("abcdef", 3) == "abc"
    assert line_to_domain_len("a b", 10) == "a-b"


def test_log_write_appends(tmp_path):
    path = tmp_path / "game.log"
    log_write(path, "hello", 42)
    log_write(path, "again", -1)
    assert path.read_text(encoding="utf-8") == "hello: 42\nagain: -1\n"


def test_log_write_ignores_missing_dir(tmp_path):
    path = tmp_path / "missing" / "game.log"
    log_write(path, "hello", 1)
    assert not path.exists()