"""Classify the current layout and print it."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from .detector import DisplayReport

SINGLE = "single"
CLONED = "cloned"
EXTENDED = "extended"

THEME = Theme(
    {
        "label": "bold green",
        "heading": "bold",
        "output": "cyan",
        "detail": "dim white",
    }
)


def classify_layout(report: DisplayReport) -> str:
    active = report.active
    if len(active) == 1:
        return SINGLE
    if report.origin_count == len(active):
        return CLONED
    return EXTENDED


def render_status(report: DisplayReport, console: Optional[Console] = None) -> str:
    console = console or Console(theme=THEME, highlight=False, soft_wrap=True)
    layout = classify_layout(report)

    console.print(f"[heading]layout:[/heading] [label]{layout}[/label]")
    names = " ".join(f"[output]{escape(name)}[/output]" for name in report.active)
    console.print(f"[heading]active:[/heading] {names}")
    console.print("[heading]report:[/heading]")
    for line in report.raw.splitlines():
        console.print(f"[detail]{escape(line)}[/detail]")
    return layout
