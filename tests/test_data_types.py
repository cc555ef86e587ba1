import pytest

from guessing_game.data_types import GUESS_MAX, Outcome, compare, parse_guess


class TestParseGuess:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("42", 42),
            ("42\n", 42),
            ("  7\t\r\n", 7),
            ("0", 0),
            ("+5", 5),
            ("007", 7),
            (str(GUESS_MAX), GUESS_MAX),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_guess(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "\n", "   ", "abc", "-1", "+", "4 2", "1_000", "3.0", "0x10", "١٢"],
    )
    def test_invalid(self, text):
        assert parse_guess(text) is None

    def test_out_of_range(self):
        assert parse_guess(str(GUESS_MAX + 1)) is None


class TestCompare:
    def test_low(self):
        assert compare(1, 50) is Outcome.LOW

    def test_high(self):
        assert compare(100, 50) is Outcome.HIGH

    def test_equal(self):
        assert compare(50, 50) is Outcome.EQUAL

    def test_messages(self):
        assert [o.value for o in Outcome] == ["Too low!", "Too high!", "You win!"]
