"""Tests for result formatting."""

from __future__ import annotations

import json

from amptheme.output.console import style_for_phase
from amptheme.output.formatters import format_result
from amptheme.services.result import ServiceError, ServiceResult

RULES_RESULT = ServiceResult(
    ok=True,
    op="list_rules",
    data={
        "theme": "twentyfifteen",
        "template": "twentyfifteen",
        "rules": [
            {"name": "add_nav_menu_styles", "phase": "pre-parse", "params": {}},
            {
                "name": "add_nav_menu_toggle",
                "phase": "post-parse",
                "params": {"nav_container_id": "[menu]"},
            },
        ],
        "count": 2,
    },
)


class TestFormatResult:
    def test_rewrite_prints_html(self) -> None:
        result = ServiceResult(ok=True, op="rewrite", data={"html": "<html></html>"})
        assert format_result(result) == "<html></html>"

    def test_json(self) -> None:
        result = ServiceResult(ok=True, op="rewrite", data={"html": "<html></html>"})
        payload = json.loads(format_result(result, json_output=True))
        assert payload["data"]["html"] == "<html></html>"

    def test_quiet(self) -> None:
        assert format_result(RULES_RESULT, quiet=True) == "OK: list_rules"

    def test_rules_table(self) -> None:
        output = format_result(RULES_RESULT)
        assert "twentyfifteen (template: twentyfifteen)" in output
        assert "add_nav_menu_styles" in output
        assert "post-parse" in output
        assert '{"nav_container_id":"[menu]"}' in output

    def test_generic_data(self) -> None:
        result = ServiceResult(
            ok=True,
            op="rewrite_file",
            data={"output": "out.html", "rules_applied": ["force_svg_support"]},
        )
        assert format_result(result) == (
            'OK: rewrite_file\n  output: out.html\n  rules_applied: ["force_svg_support"]'
        )

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="rewrite",
            error=ServiceError(code="EMPTY_DOCUMENT", message="Document is empty"),
        )
        assert format_result(result) == "ERROR: rewrite - Document is empty"


class TestStyleForPhase:
    def test_known_phases(self) -> None:
        assert style_for_phase("pre-parse") == "amp.phase.pre-parse"
        assert style_for_phase("post-parse") == "amp.phase.post-parse"

    def test_unknown_phase(self) -> None:
        assert style_for_phase("other") == ""
