import asyncio

import pytest

from cruparse.lexer import tokenize
from cruparse.parser import Parser, parse, parse_async

HEADER = "+ABC12"
LINE = "1 C1 P=30 H=L 8:00-9:30 A1 S=ABC1 //"
VALID = f"{HEADER}\n{LINE}\n"

SAMPLE = (
    "+UC12\r\n"
    "1,C1,P=24,H=MA 10:00-12:00,F1,S=P202//\r\n"
    "1,D2,P=12,H=J 14:00-16:00,F2,S=B103//\r\n"
    "+MC01A1\r\n"
    "1,T1,P=30,H=V 8:00-10:00,A,S=AB1//\r\n"
)


def test_empty_input_conforms():
    assert parse("") is True


def test_whitespace_only_input_conforms():
    assert parse(" \r\n,\n") is True


def test_minimal_document():
    assert parse(VALID) is True


def test_sample_export():
    assert parse(SAMPLE) is True


def test_corrupted_capacity():
    assert parse(VALID.replace("P=30", "X=30")) is False


def test_two_lines_under_one_header():
    assert parse(f"{HEADER}\n{LINE}\n{LINE}\n") is True


def test_two_modules():
    text = VALID + "+DEF\n1 T2 P=5 H=V 14:00-16:00 B S=C2 //\n"
    assert parse(text) is True


def test_missing_header():
    assert parse(LINE) is False


def test_header_without_lines():
    assert parse(HEADER) is False


def test_header_followed_by_header():
    assert parse(f"{HEADER}\n+DEF\n{LINE}\n") is False


@pytest.mark.parametrize("text", [
    f"{HEADER}\n1 C1 P=30 H=L 8:00-9:30 A1 S=ABC1\n",
    f"{HEADER}\n{LINE}\n1 C1 P=30\n",
    f"{HEADER}\n{LINE}\n+DEF\n1 C1\n",
])
def test_truncated_document(text):
    assert parse(text) is False


def test_swapped_day_and_time():
    assert parse(VALID.replace("H=L 8:00-9:30", "8:00-9:30 H=L")) is False


@pytest.mark.parametrize("suffix", [
    f"+DEF\n{LINE}\n",
    "garbage tokens\n",
    f"{LINE}\n",
    "",
])
def test_result_does_not_depend_on_tokens_after_failure(suffix):
    bad = VALID.replace("A1", "a1")
    assert parse(bad + suffix) is False


def test_failure_stops_before_next_module():
    tokens = tokenize(f"+abc\n{LINE}\n+DEF\n{LINE}\n")
    parser = Parser(tokens)
    assert parser.validate() is False
    assert parser.pos == 9
    assert parser.peek() == "+DEF"


def test_failure_finishes_current_module():
    tokens = tokenize(f"{HEADER}\n{LINE.replace('H=L', 'H=X')}\n{LINE}\n+DEF\n{LINE}\n")
    parser = Parser(tokens)
    assert parser.validate() is False
    assert parser.peek() == "+DEF"


def test_consume_past_end_returns_none():
    parser = Parser([HEADER])
    assert parser.consume() == HEADER
    assert parser.consume() is None
    assert parser.pos == 1
    assert parser.at_end()


def test_validate_does_not_mutate_tokens():
    tokens = tokenize(VALID)
    before = list(tokens)
    Parser(tokens).validate()
    assert tokens == before


def test_parses_are_independent():
    assert parse(LINE) is False
    assert parse(VALID) is True


def test_parse_async():
    assert asyncio.run(parse_async(VALID)) is True
    assert asyncio.run(parse_async(LINE)) is False
