import pytest

from configkeeper.core.config.coercion import EntryType, format_value, parse_value
from configkeeper.core.errors import ParseFailure


def test_parse_flag_only_true_is_true():
    assert parse_value("true", EntryType.FLAG) is True
    assert parse_value(" TRUE ", EntryType.FLAG) is True
    assert parse_value("yes", EntryType.FLAG) is False
    assert parse_value("", EntryType.FLAG) is False
    assert parse_value(True, EntryType.FLAG) is True


def test_parse_count():
    assert parse_value("42", EntryType.COUNT) == 42
    assert parse_value(" -7 ", EntryType.COUNT) == -7
    assert parse_value(13, EntryType.COUNT) == 13


def test_parse_count_rejects_garbage():
    with pytest.raises(ParseFailure) as exc:
        parse_value("12abc", EntryType.COUNT, "volume")
    assert exc.value.context == {"name": "volume", "value": "12abc"}
    assert isinstance(exc.value, ValueError)


def test_text_and_choice_are_raw_strings():
    assert parse_value("  spaced  ", EntryType.TEXT) == "  spaced  "
    assert parse_value("dark", EntryType.CHOICE) == "dark"


def test_parse_none_fails():
    with pytest.raises(ParseFailure):
        parse_value(None, EntryType.TEXT, "name")


def test_format_value():
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(150) == "150"
    assert format_value(None) == ""


def test_entry_type_from_name():
    assert EntryType.from_name("choose") is EntryType.CHOICE
    assert EntryType.from_name("Count") is EntryType.COUNT
    assert EntryType.from_name("flag") is EntryType.FLAG
    with pytest.raises(ParseFailure):
        EntryType.from_name("float")


@pytest.mark.parametrize("raw", ["a\x01b", "\x00", "tab\x0bbed", "\ud800"])
def test_parse_text_rejects_characters_xml_cannot_store(raw):
    with pytest.raises(ParseFailure):
        parse_value(raw, EntryType.TEXT, "player_name")
    with pytest.raises(ParseFailure):
        parse_value(raw, EntryType.CHOICE, "theme")


def test_parse_text_keeps_whitespace_and_unicode():
    raw = "line one\nline two\ttabbed · ünïcode 🎧"
    assert parse_value(raw, EntryType.TEXT) == raw
