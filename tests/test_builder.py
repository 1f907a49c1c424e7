"""Tests for the record builder"""

import pytest
from datetime import datetime, timezone

from logged import EmptyMessage, MissingArgument
from logged.builders import PayloadKind, SimpleBuilder, classify
from logged.formatters import SimpleFormatter
from logged.handlers import ConsoleHandler


class TestClassify:
    """Test payload classification."""

    def test_kinds(self):
        assert classify({"message": "x"}) is PayloadKind.STRUCTURED
        assert classify("x") is PayloadKind.TEXT
        assert classify(42) is PayloadKind.OTHER
        assert classify([1, 2]) is PayloadKind.OTHER


class TestSimpleBuilder:
    """Test argument normalization."""

    def test_text_message(self):
        record = SimpleBuilder().build("hello", 1, "two")
        assert record.message == "hello"
        assert record.fields["args"] == [1, "two"]
        assert record.level is None
        assert record.name is None

    def test_mapping_payload(self):
        record = SimpleBuilder().build({"message": "hi", "userId": 5})
        assert record.message == "hi"
        assert record.fields["userId"] == 5
        assert record.fields["args"] == []

    def test_mapping_with_extra_args(self):
        record = SimpleBuilder().build({"message": "hi"}, "extra")
        assert record.fields["args"] == ["extra"]

    def test_no_arguments(self):
        with pytest.raises(MissingArgument):
            SimpleBuilder().build()

    def test_missing_argument_is_type_error(self):
        with pytest.raises(TypeError):
            SimpleBuilder().build()

    def test_number_message(self):
        assert SimpleBuilder().build(42).message == "42"

    def test_composite_message_is_json(self):
        assert SimpleBuilder().build([1, "a"]).message == '[1, "a"]'

    def test_object_message_falls_back_to_str(self):
        class Thing:
            def __str__(self):
                return "thing"

        assert SimpleBuilder().build(Thing()).message == "thing"

    def test_empty_string(self):
        with pytest.raises(EmptyMessage):
            SimpleBuilder().build("")

    def test_mapping_without_message(self):
        with pytest.raises(EmptyMessage):
            SimpleBuilder().build({"userId": 5})

    def test_non_text_message_in_mapping(self):
        assert SimpleBuilder().build({"message": 7}).message == "7"

    def test_created_at_stamped(self):
        before = datetime.now(timezone.utc)
        record = SimpleBuilder().build("x")
        after = datetime.now(timezone.utc)
        assert before <= record.created_at <= after

    def test_created_at_supplied(self):
        when = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        record = SimpleBuilder().build({"message": "x", "createdAt": when})
        assert record.created_at == when
        assert "createdAt" not in record.fields

    @pytest.mark.parametrize("value", [1700000000000, float("nan"), float("inf")])
    def test_out_of_range_created_at_kept_as_field(self, value):
        before = datetime.now(timezone.utc)
        record = SimpleBuilder().build({"message": "ok", "createdAt": value})
        assert record.created_at >= before
        assert record.fields["createdAt"] is value

    def test_out_of_range_created_at_through_logger(self, context):
        seen = []
        context.root.add_handler(ConsoleHandler(formatter=SimpleFormatter("{message}")))
        context.root.handlers[0].emit = lambda text, record: seen.append(record)

        context.get_logger("svc").info({"message": "ok", "createdAt": 1700000000000})

        assert seen[0].message == "ok"
        assert seen[0].fields["createdAt"] == 1700000000000

    def test_epoch_seconds_created_at(self):
        record = SimpleBuilder().build({"message": "x", "createdAt": 0})
        assert record.created_at == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_naive_created_at_taken_as_utc(self):
        record = SimpleBuilder().build({"message": "x", "created_at": datetime(2024, 1, 2)})
        assert record.created_at.tzinfo is timezone.utc

    def test_level_and_name_in_payload(self):
        record = SimpleBuilder().build({"message": "x", "level": 40, "name": "custom"})
        assert record.level == 40
        assert record.name == "custom"

    def test_callable(self):
        assert SimpleBuilder()("x").message == "x"
