"""Tests for output mode dispatch."""

import json

from numview.output.formatters import OutputSettings, format_result
from numview.services.inspect import InspectService


class TestFormatResult:
    def test_default_is_human(self) -> None:
        output = format_result(InspectService().inspect("7"))
        assert "Number viewer" in output

    def test_json_output(self) -> None:
        output = format_result(InspectService().inspect("7"), OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["op"] == "inspect"
        assert parsed["data"]["value"] == 7
        assert parsed["data"]["facts"]["radix"]["binary"] == "0b111"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        output = format_result(InspectService().inspect("7"), settings)
        assert json.loads(output)["data"]["kind"] == "integer"

    def test_quiet(self) -> None:
        assert format_result(InspectService().inspect("0b11"), OutputSettings(quiet=True)) == "3"

    def test_json_error(self) -> None:
        output = format_result(InspectService().inspect("1..2"), OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "INVALID_FLOAT"
        assert parsed["error"]["detail"]["input"] == "1..2"

    def test_json_non_finite_is_null(self) -> None:
        output = format_result(InspectService().inspect("-inf"), OutputSettings(json_output=True))
        assert json.loads(output)["data"]["value"] is None
