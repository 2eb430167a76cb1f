from __future__ import annotations

import io
import random

import pytest

from simple_math_game.player_input import INT_MAX, INT_MIN, PlayerInput


def _reader(text: str) -> tuple[PlayerInput, io.StringIO]:
    out = io.StringIO()
    return PlayerInput(stdin=io.StringIO(text), out=out), out


def test_rejects_garbage_then_out_of_range_then_accepts() -> None:
    reader, out = _reader("abc\n999\n5\n")

    assert reader.read_int(1, 5) == 5

    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert "'abc' is not an integer" in lines[0]
    assert "999 is out of range" in lines[1]
    for line in lines:
        assert "between 1 and 5 inclusive" in line


def test_single_bound_defaults_low_to_one() -> None:
    reader, out = _reader("0\n3\n")
    assert reader.read_int(3) == 3
    assert "between 1 and 3 inclusive" in out.getvalue()


def test_no_bounds_accepts_any_32_bit_int() -> None:
    reader, out = _reader(f"{INT_MIN - 1}\n{INT_MIN}\n")
    assert reader.read_int() == INT_MIN
    assert f"between {INT_MIN} and {INT_MAX} inclusive" in out.getvalue()


def test_surrounding_whitespace_and_sign_are_accepted() -> None:
    reader, _ = _reader("  -42 \n")
    assert reader.read_int() == -42


def test_blank_line_is_reprompted() -> None:
    reader, out = _reader("\n2\n")
    assert reader.read_int(0, 5) == 2
    assert "'' is not an integer" in out.getvalue()


def test_end_of_input_raises_eof() -> None:
    reader, _ = _reader("x\n")
    with pytest.raises(EOFError):
        reader.read_int(1, 2)


def test_inverted_bounds_are_rejected() -> None:
    reader, _ = _reader("1\n")
    with pytest.raises(ValueError):
        reader.read_int(5, 1)


def test_never_returns_outside_range() -> None:
    rng = random.Random(0)
    junk = ["", "abc", "1.5", "--3", "0x10", " ", "7e2"]
    for _ in range(50):
        lines = [
            rng.choice(junk) if rng.random() < 0.4 else str(rng.randint(-50, 50))
            for _ in range(20)
        ]
        lines.append("3")  # guarantee termination
        reader, _ = _reader("\n".join(lines) + "\n")
        value = reader.read_int(-3, 3)
        assert -3 <= value <= 3


@pytest.mark.parametrize("line", ["1_0", "５", "0x10", "1.0"])
def test_only_plain_ascii_decimal_is_an_integer(line: str) -> None:
    reader, out = _reader(f"{line}\n3\n")
    assert reader.read_int(0, 100) == 3
    assert f"'{line}' is not an integer" in out.getvalue()


def test_leading_zeros_and_plus_sign_are_accepted() -> None:
    reader, _ = _reader("+007\n")
    assert reader.read_int(1, 10) == 7


def test_huge_number_is_out_of_range_and_echo_is_truncated() -> None:
    reader, out = _reader("9" * 5000 + "\n4\n")

    assert reader.read_int(1, 5) == 4

    [message] = out.getvalue().splitlines()
    assert "is out of range" in message
    assert "not an integer" not in message
    assert "9" * 20 + "..." in message
    assert len(message) < 120
