"""Tests for gradmap.core.stops — lenient stop-text parser and CSS preview."""

import pytest
from gradmap.core.stops import css_gradient, parse_stops
from gradmap.core.types import ColorStop

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


def _positions(text: str) -> list[float]:
    return [s.position for s in parse_stops(text)]


def _colors(text: str) -> list[tuple[int, int, int]]:
    return [s.color for s in parse_stops(text)]


class TestBasics:
    def test_empty(self):
        assert parse_stops('') == []

    def test_whitespace_only(self):
        assert parse_stops('  ,, \n ') == []

    def test_single_stop_at_zero(self):
        assert parse_stops('FF0000') == [ColorStop(color=RED, position=0.0)]

    def test_three_evenly_spaced(self):
        stops = parse_stops('FF0000,00FF00,0000FF')
        assert [s.color for s in stops] == [RED, GREEN, BLUE]
        assert [s.position for s in stops] == [0.0, 0.5, 1.0]

    def test_explicit_positions(self):
        assert _positions('FF0000-20,0000FF-80') == [0.2, 0.8]
        assert _colors('FF0000-20,0000FF-80') == [RED, BLUE]

    def test_invalid_hex_dropped(self):
        assert parse_stops('ZZZZZZ') == []


class TestTokenizing:
    def test_mixed_separators(self):
        stops = parse_stops(' #ff0000 ,  00ff00\n0000FF\t')
        assert [s.color for s in stops] == [RED, GREEN, BLUE]
        assert [s.position for s in stops] == [0.0, 0.5, 1.0]

    def test_hash_optional(self):
        assert _colors('#FF0000 00FF00') == [RED, GREEN]

    def test_case_insensitive(self):
        assert _colors('ff0000') == [RED]

    @pytest.mark.parametrize('token', ['FFF', 'FF00000', '##FF0000', 'GG0000', '#12345'])
    def test_malformed_tokens(self, token):
        assert parse_stops(token) == []


class TestPositions:
    def test_invalid_token_consumes_index(self):
        stops = parse_stops('FF0000 nope 0000FF')
        assert [s.color for s in stops] == [RED, BLUE]
        assert [s.position for s in stops] == [0.0, 1.0]

    def test_invalid_middle_token_keeps_spacing(self):
        assert _positions('000000 xx FFFFFF 888888') == [0.0, 2 / 3, 1.0]

    def test_mixed_explicit_and_implicit(self):
        assert _positions('000000 FF0000-10 FFFFFF') == [0.0, 0.1, 1.0]

    def test_clamped_high(self):
        assert _positions('FF0000-150') == [1.0]

    def test_sorted_ascending(self):
        assert _colors('0000FF-80 FF0000-20') == [RED, BLUE]

    def test_stable_on_ties(self):
        assert _colors('FF0000-50 00FF00-50') == [RED, GREEN]

    def test_non_numeric_position_falls_back_to_spacing(self):
        stops = parse_stops('FF0000-abc 0000FF')
        assert [s.position for s in stops] == [0.0, 1.0]

    def test_trailing_garbage_after_digits(self):
        assert _positions('FF0000-25%') == [0.25]

    def test_empty_position(self):
        assert _positions('FF0000- 0000FF') == [0.0, 1.0]

    def test_zero_and_hundred(self):
        assert _positions('FF0000-0 0000FF-100') == [0.0, 1.0]

    def test_huge_position_clamps_to_one(self):
        assert _positions('FF0000-' + '9' * 400 + ' 0000FF') == [1.0, 1.0]
        assert _positions('FF0000-' + '1' * 5000) == [1.0]

    def test_unicode_digits_are_not_a_position(self):
        # Arabic-Indic 50 is not read as a number
        assert _positions('FF0000-٥٠ 0000FF') == [0.0, 1.0]


class TestColorStop:
    def test_hex_uppercase(self):
        assert parse_stops('#abcdef')[0].hex == '#ABCDEF'

    def test_frozen(self):
        stop = parse_stops('FF0000')[0]
        with pytest.raises(AttributeError):
            stop.position = 0.5  # type: ignore[misc]


class TestCssGradient:
    def test_empty_is_neutral(self):
        assert css_gradient([]) == '#ccc'

    def test_two_stops(self):
        assert css_gradient(parse_stops('000000,FFFFFF')) == 'linear-gradient(to right, #000000 0%, #FFFFFF 100%)'

    def test_three_stops(self):
        css = css_gradient(parse_stops('ff0000 00ff00 0000ff'))
        assert css == 'linear-gradient(to right, #FF0000 0%, #00FF00 50%, #0000FF 100%)'

    def test_explicit(self):
        css = css_gradient(parse_stops('FF0000-20,0000FF-80'))
        assert css == 'linear-gradient(to right, #FF0000 20%, #0000FF 80%)'


class TestNeverRaises:
    @pytest.mark.parametrize(
        'text',
        [
            'FF0000-' + '9' * 400,
            'FF0000-' + '1' * 5000 + ',0000FF-' + '7' * 5000,
            'FF0000-+' + '3' * 320,
            'FF0000-٥٠',
            '００００００',
            '-',
            '--',
            '#',
            '#-#-#',
            'FF0000--20',
            'FF0000-20-30-40',
            '\x00\x01FF0000\x7f',
            ' FF0000 　0000FF﻿',
            '\tFF0000\r\n\x0b\x0c0000FF',
            'ß' * 50,
            '😀 FF0000 😀',
            '#' * 1000,
            ',' * 1000 + 'FF0000',
        ],
    )
    def test_always_a_list_of_clamped_stops(self, text):
        stops = parse_stops(text)
        assert isinstance(stops, list)
        assert all(isinstance(s, ColorStop) for s in stops)
        assert all(0.0 <= s.position <= 1.0 for s in stops)
        assert [s.position for s in stops] == sorted(s.position for s in stops)
        css_gradient(stops)
