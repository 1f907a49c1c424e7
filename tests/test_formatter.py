"""Tests for the template and JSON formatters"""

import json
import pytest
from datetime import datetime, timedelta, timezone

from logged import LevelRegistry, LogRecord
from logged.formatters import (
    FieldOptions,
    JSONFormatter,
    SimpleFormatter,
    format_date,
    parse_options,
)

T = datetime(2024, 3, 5, 7, 8, 9, 123000, tzinfo=timezone.utc)


def make_record(**kwargs):
    values = {
        "message": "ok",
        "level": 20,
        "name": "svc.db",
        "created_at": T,
        "fields": {"args": []},
    }
    values.update(kwargs)
    return LogRecord(**values)


@pytest.fixture
def levels():
    return LevelRegistry()


class TestFormatDate:
    """Test the date sub-format."""

    def test_iso(self):
        assert format_date(T, "%i") == "2024-03-05T07:08:09.123Z"

    def test_directives(self):
        assert format_date(T, "%Y/%m/%d %H:%M:%S") == "2024/03/05 07:08:09"

    def test_literal_percent(self):
        assert format_date(T, "100%% at %H") == "100% at 07"

    def test_unknown_directive_dropped(self):
        assert format_date(T, "%Y%q-%d") == "2024-05"

    def test_trailing_percent_dropped(self):
        assert format_date(T, "%Y%") == "2024"

    def test_converted_to_utc(self):
        local = T.astimezone(timezone(timedelta(hours=9)))
        assert format_date(local, "%H") == "07"

    def test_naive_taken_as_utc(self):
        assert format_date(datetime(2024, 1, 2, 3, 4, 5), "%i") == "2024-01-02T03:04:05.000Z"


class TestOptions:
    """Test the options mini-language."""

    def test_parse(self):
        assert parse_options("?") == FieldOptions(skip_empty=True)
        assert parse_options("03") == FieldOptions(pad="0", width=3)
        assert parse_options("0.2") == FieldOptions(pad="0", decimals=2)
        assert parse_options("?08.3") == FieldOptions(True, "0", 8, 3)
        assert parse_options("10") == FieldOptions(width=10)

    def test_malformed_options_ignored(self):
        assert parse_options("x5") == FieldOptions()
        assert parse_options(None) == FieldOptions()

    def test_zero_pad(self):
        assert parse_options("03").apply("7") == "007"

    def test_decimals(self):
        assert parse_options("0.2").apply("7") == "7.00"

    def test_space_pad(self):
        assert parse_options("5").apply("ab") == "   ab"

    def test_padding_never_truncates(self):
        assert parse_options("2").apply("12345") == "12345"
        assert parse_options("0.2").apply("3.14159") == "3.14159"

    def test_split_on_first_dot(self):
        assert parse_options("03.4").apply("1.2.3") == "001.2.30"

    @pytest.mark.parametrize("content", ["", "{}", "[]"])
    def test_skip_empty(self, content):
        assert parse_options("?").apply(content) == ""

    def test_skip_empty_absent(self):
        assert parse_options("?").apply("None", absent=True) == ""

    def test_skip_empty_keeps_content(self):
        assert parse_options("?").apply("[1]") == "[1]"
        assert parse_options("?").apply("None") == "None"


class TestSimpleFormatter:
    """Test template rendering."""

    def test_default_template(self, levels):
        formatter = SimpleFormatter(date_format="%i", levels=levels)
        assert formatter.format(make_record()) == "[2024-03-05T07:08:09.123Z][svc.db] INFO: ok "

    def test_args_rendered_as_json(self, levels):
        formatter = SimpleFormatter(levels=levels)
        text = formatter.format(make_record(fields={"args": [1, "a"]}))
        assert text.endswith('INFO: ok [1, "a"]')

    def test_repeated_references(self, levels):
        formatter = SimpleFormatter("{message}{message}-{message:5}", levels=levels)
        assert formatter.format(make_record()) == "okok-   ok"

    def test_nested_path(self, levels):
        formatter = SimpleFormatter("{user.id} {args.1}", levels=levels)
        record = make_record(fields={"user": {"id": 9}, "args": ["a", "b"]})
        assert formatter.format(record) == "9 b"

    def test_missing_path(self, levels):
        formatter = SimpleFormatter("[{nope}][{nope:?}][{user.x}]", levels=levels)
        assert formatter.format(make_record()) == "[None][][None]"

    def test_skip_empty_keeps_none_text(self, levels):
        formatter = SimpleFormatter("[{message:?}][{owner:?}]", levels=levels)
        record = make_record(message="None", fields={"owner": None})
        assert formatter.format(record) == "[None][]"

    def test_unknown_level_name(self, levels):
        formatter = SimpleFormatter("{level}", levels=levels)
        assert formatter.format(make_record(level=33)) == "Level(33)"

    def test_custom_level_name(self, levels):
        levels.add_level("notice", 25)
        formatter = SimpleFormatter("{level}", levels=levels)
        assert formatter.format(make_record(level=25)) == "NOTICE"

    def test_numeric_options(self, levels):
        formatter = SimpleFormatter("{elapsed:0.3}s #{count:04}", levels=levels)
        record = make_record(fields={"elapsed": 1.5, "count": 7})
        assert formatter.format(record) == "1.500s #0007"

    def test_datetime_field_uses_date_format(self, levels):
        formatter = SimpleFormatter("{when}", date_format="%Y", levels=levels)
        assert formatter.format(make_record(fields={"when": T})) == "2024"

    def test_unreferenced_fields_ignored(self, levels):
        formatter = SimpleFormatter("{message}", levels=levels)
        assert formatter.format(make_record(fields={"secret": "x"})) == "ok"

    def test_text_without_references(self, levels):
        formatter = SimpleFormatter("plain {not closed", levels=levels)
        assert formatter.format(make_record()) == "plain {not closed"

    def test_reference_in_message_not_expanded(self, levels):
        formatter = SimpleFormatter("{message}", levels=levels)
        assert formatter.format(make_record(message="{message}")) == "{message}"

    def test_broken_value_degrades(self, levels):
        class Broken:
            def __str__(self):
                raise RuntimeError("boom")

        formatter = SimpleFormatter("[{thing}]", levels=levels)
        assert formatter.format(make_record(fields={"thing": Broken()})) == "[]"

    def test_uses_context_levels(self, context):
        context.add_level("notice", 25)
        assert SimpleFormatter("{level}").format(make_record(level=25)) == "NOTICE"

    def test_callable(self, levels):
        assert SimpleFormatter("{message}", levels=levels)(make_record()) == "ok"


class TestJSONFormatter:
    """Test JSON rendering."""

    def test_format(self, levels):
        data = json.loads(JSONFormatter(levels=levels).format(make_record(fields={"args": [], "k": 1})))
        assert data == {
            "timestamp": "2024-03-05T07:08:09.123Z",
            "level": "INFO",
            "message": "ok",
            "logger": "svc.db",
            "fields": {"args": [], "k": 1},
        }

    def test_without_fields(self, levels):
        data = json.loads(JSONFormatter(include_fields=False, levels=levels).format(make_record()))
        assert "fields" not in data

    def test_non_serializable_field(self, levels):
        data = json.loads(JSONFormatter(levels=levels).format(make_record(fields={"when": T})))
        assert data["fields"]["when"] == str(T)
