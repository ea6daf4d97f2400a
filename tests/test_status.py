"""Unit tests for dispswitch.display.status - layout classification and output."""

import io

from rich.console import Console

from dispswitch.display.status import CLONED, EXTENDED, SINGLE, THEME, classify_layout, render_status


def plain_console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, theme=THEME, highlight=False, soft_wrap=True, color_system=None)


class TestClassifyLayout:
    """Tests for classify_layout function."""

    def test_one_active_is_single(self, make_report) -> None:
        report = make_report(
            [("A", True, "1920x1080+0+0"), ("B", True, ""), ("C", True, "")]
        )
        assert classify_layout(report) == SINGLE

    def test_one_active_off_origin_is_single(self, make_report) -> None:
        report = make_report([("A", True, ""), ("B", True, "1920x1080+1920+0")])
        assert classify_layout(report) == SINGLE

    def test_all_at_origin_is_cloned(self, cloned_report) -> None:
        assert classify_layout(cloned_report) == CLONED

    def test_spread_out_is_extended(self, extended_report) -> None:
        assert classify_layout(extended_report) == EXTENDED

    def test_partial_overlap_is_extended(self, make_report) -> None:
        report = make_report(
            [
                ("A", True, "1920x1080+0+0"),
                ("B", True, "1920x1080+0+0"),
                ("C", True, "1920x1080+1920+0"),
            ]
        )
        assert classify_layout(report) == EXTENDED


class TestRenderStatus:
    """Tests for render_status function."""

    def test_prints_label_active_and_report(self, extended_report) -> None:
        buffer = io.StringIO()
        layout = render_status(extended_report, plain_console(buffer))
        out = buffer.getvalue()
        assert layout == EXTENDED
        assert "layout: extended" in out
        assert "active: eDP1 HDMI1" in out
        assert "DP1 disconnected (normal left inverted right x axis y axis)" in out
        assert "   1920x1080     60.00*+  59.94" in out

    def test_markup_in_report_is_not_interpreted(self, make_report) -> None:
        report = make_report([("A", True, "1920x1080+0+0")])
        report = report.__class__(raw=report.raw + "[bold]literal[/bold]\n", outputs=report.outputs)
        buffer = io.StringIO()
        render_status(report, plain_console(buffer))
        assert "[bold]literal[/bold]" in buffer.getvalue()
