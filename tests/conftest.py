"""Pytest fixtures for dispswitch tests."""

from typing import Callable, Sequence

import pytest

from dispswitch.display.context import RunContext
from dispswitch.display.detector import DisplayDetector, DisplayReport, parse_report

MODE_LINE = "   1920x1080     60.00*+  59.94"

EXTENDED_REPORT = "\n".join(
    [
        "Screen 0: minimum 8 x 8, current 3840 x 1080, maximum 32767 x 32767",
        "eDP1 connected primary 1920x1080+0+0 (normal left inverted right x axis y axis) 344mm x 194mm",
        MODE_LINE,
        "DP1 disconnected (normal left inverted right x axis y axis)",
        "HDMI1 connected 1920x1080+1920+0 (normal left inverted right x axis y axis) 527mm x 296mm",
        MODE_LINE,
        "VIRTUAL1 disconnected (normal left inverted right x axis y axis)",
        "",
    ]
)

CLONED_REPORT = "\n".join(
    [
        "Screen 0: minimum 8 x 8, current 1920 x 1080, maximum 32767 x 32767",
        "eDP1 connected primary 1920x1080+0+0 (normal left inverted right x axis y axis) 344mm x 194mm",
        MODE_LINE,
        "HDMI1 connected 1920x1080+0+0 (normal left inverted right x axis y axis) 527mm x 296mm",
        MODE_LINE,
        "",
    ]
)


def output_line(name: str, connected: bool = True, geometry: str = "", primary: bool = False) -> str:
    if not connected:
        return f"{name} disconnected (normal left inverted right x axis y axis)"
    parts = [name, "connected"]
    if primary:
        parts.append("primary")
    if geometry:
        parts.append(geometry)
    parts.append("(normal left inverted right x axis y axis)")
    return " ".join(parts)


@pytest.fixture
def make_report() -> Callable[..., DisplayReport]:
    """Build a report from (name, connected, geometry) tuples."""

    def _make(outputs: Sequence[tuple]) -> DisplayReport:
        lines = ["Screen 0: minimum 8 x 8, current 1920 x 1080, maximum 32767 x 32767"]
        for name, connected, geometry in outputs:
            lines.append(output_line(name, connected, geometry))
            if geometry:
                lines.append(MODE_LINE)
        return parse_report("\n".join(lines) + "\n")

    return _make


@pytest.fixture
def make_context(make_report) -> Callable[..., RunContext]:
    """Build a context where ``connected`` outputs are connected and ``active`` ones are lit.

    Active outputs are placed side by side unless ``cloned`` is set.
    """

    def _make(all_outputs, connected, active=(), cloned=False) -> RunContext:
        outputs = []
        x = 0
        for name in all_outputs:
            geometry = ""
            if name in active:
                geometry = f"1920x1080+{0 if cloned else x}+0"
                x += 1920
            outputs.append((name, name in connected, geometry))
        return RunContext.from_report(make_report(outputs))

    return _make


class StubDetector(DisplayDetector):
    """Detector returning a fixed report without touching xrandr."""

    def __init__(self, report: DisplayReport):
        super().__init__()
        self.report = report
        self.calls = 0

    def detect(self) -> DisplayReport:
        self.calls += 1
        return self.report


@pytest.fixture
def extended_report() -> DisplayReport:
    return parse_report(EXTENDED_REPORT)


@pytest.fixture
def cloned_report() -> DisplayReport:
    return parse_report(CLONED_REPORT)


@pytest.fixture
def stub_detector() -> Callable[[DisplayReport], StubDetector]:
    return StubDetector
