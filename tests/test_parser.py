import pytest

from giveaway.services.errors import DuplicateNumbersError, InvalidFormatError
from giveaway.services.parser import (
    find_duplicate_numbers,
    make_participant_id,
    parse_line,
    parse_participants,
    parse_report,
    validate_participants,
)


def test_parses_lines_in_order():
    participants = parse_participants("1 - Alice\n2 - Bob")

    assert [p.number for p in participants] == [1, 2]
    assert [p.name for p in participants] == ["Alice", "Bob"]
    assert [p.id for p in participants] == ["1-alice", "2-bob"]


def test_whitespace_around_dash_is_optional():
    participants = parse_participants("7-Ana\n  8 -   Luis Silva  \n9\t-\tSara")

    assert [(p.number, p.name) for p in participants] == [
        (7, "Ana"),
        (8, "Luis Silva"),
        (9, "Sara"),
    ]


def test_non_matching_lines_are_dropped():
    text = "abc - Alice\n3 -\n- Bob\n4 - Dave\nno dash here\n\n   \n"
    report = parse_report(text)

    assert [(p.number, p.name) for p in report.participants] == [(4, "Dave")]
    assert report.skipped_lines == 4


def test_windows_line_endings():
    participants = parse_participants("1 - Alice\r\n2 - Bob\r\n")

    assert [p.name for p in participants] == ["Alice", "Bob"]


def test_name_may_contain_dashes():
    participant = parse_line("12 - Jean-Luc - Picard")

    assert participant.number == 12
    assert participant.name == "Jean-Luc - Picard"


def test_leading_zeros_parse_as_integer():
    assert parse_line("007 - Bond").number == 7


def test_negative_number_is_not_matched():
    assert parse_line("-1 - Nobody") is None


def test_empty_text():
    assert parse_participants("") == []
    assert parse_participants("   \n\n") == []


def test_participant_id_normalizes_name():
    assert make_participant_id(1, "  John   Doe ") == "1-john-doe"
    assert make_participant_id(2, "MARIA\tDa  Silva") == "2-maria-da-silva"


def test_participant_id_is_stable_across_parses():
    text = "1 - John  Doe\n2 - Jane Smith"

    first = [p.id for p in parse_participants(text)]
    second = [p.id for p in parse_participants(text)]

    assert first == second == ["1-john-doe", "2-jane-smith"]


def test_find_duplicate_numbers_reports_each_value_once():
    participants = parse_participants("1 - A\n2 - B\n2 - C\n1 - D\n1 - E\n3 - F")

    assert find_duplicate_numbers(participants) == [2, 1]


def test_validate_rejects_empty_result():
    with pytest.raises(InvalidFormatError):
        validate_participants([])


def test_validate_rejects_duplicate_numbers():
    participants = parse_participants("1 - A\n1 - B")

    with pytest.raises(DuplicateNumbersError) as exc_info:
        validate_participants(participants)

    assert exc_info.value.duplicates == [1]
    assert "1" in exc_info.value.notice.description
    assert exc_info.value.notice.variant == "destructive"


def test_same_name_with_different_numbers_is_valid():
    participants = parse_participants("1 - Ana\n2 - Ana")

    assert validate_participants(participants) == participants


def test_byte_order_mark_is_trimmed():
    participants = parse_participants("\ufeff1 - Alice\n2 - Bob\ufeff")

    assert [p.number for p in participants] == [1, 2]
    assert [p.name for p in participants] == ["Alice", "Bob"]
    assert participants[0].id == "1-alice"


def test_parsed_participants_are_immutable():
    from pydantic import ValidationError

    participant = parse_line("1 - Alice")

    with pytest.raises(ValidationError):
        participant.name = "Mallory"
