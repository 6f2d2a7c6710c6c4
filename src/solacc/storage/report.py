"""JSON sink for the final report."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from solacc.core.models import Report


def render_report(report: Report) -> str:
    """Pretty JSON, two-space indent, keys in report order."""
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def write_report(report: Report, output: str | Path | None, *, console: Console) -> None:
    """Write `report` to `output` (overwriting) or to stdout when `output` is None.

    The document is rendered before the file is opened, so an encoding error
    never leaves a truncated file behind.
    """
    text = render_report(report)
    if output is None:
        print(text)
        return
    with open(output, "w", encoding="utf-8") as f:
        f.write(text)
    console.print(f"[green]Saved to[/] {escape(str(output))}")
