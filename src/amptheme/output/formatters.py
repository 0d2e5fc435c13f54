"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich tables) or machines
(--json). ``rewrite`` results print their HTML payload directly.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from amptheme.output.console import create_console, get_output, style_for_phase

if TYPE_CHECKING:
    from amptheme.services.result import ServiceResult


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def _format_rules_table(data: dict[str, Any]) -> str:
    console = create_console()
    table = Table(title=f"{data['theme']} (template: {data['template']})")
    table.add_column("#", justify="right")
    table.add_column("Rule", style="amp.rule")
    table.add_column("Phase")
    table.add_column("Params", style="amp.params")
    for index, rule in enumerate(data["rules"], start=1):
        params = _json.dumps(rule["params"], separators=(",", ":")) if rule["params"] else ""
        table.add_row(
            str(index),
            Text(rule["name"]),
            Text(rule["phase"], style=style_for_phase(rule["phase"])),
            Text(params),
        )
    console.print(table)
    return get_output(console).rstrip("\n")


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    quiet: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        quiet: Reduce summaries to a single ``OK: <op>`` line.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        if result.op == "rewrite":
            return str(result.data.get("html", ""))
        if quiet:
            return f"OK: {result.op}"
        if result.op == "list_rules":
            return _format_rules_table(result.data)
        parts = [f"OK: {result.op}"]
        if result.data:
            parts.append(_format_data_human(result.data))
        return "\n".join(parts)
    error_msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} - {error_msg}"
