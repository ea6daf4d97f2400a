from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence, Tuple

from .actions import Action, Single
from .detector import DisplayReport


def normalize_order(all_outputs: Sequence[str], connected: Iterable[str]) -> Tuple[str, ...]:
    """Non-connected outputs first, in report order, then connected outputs in ``connected`` order.

    Without a --displays override ``connected`` is itself in report order.
    """
    connected = list(connected)
    connected_set = set(connected)
    known = set(all_outputs)
    off = [name for name in all_outputs if name not in connected_set]
    on = [name for name in connected if name in known]
    return tuple(off + on)


@dataclass(frozen=True)
class RunContext:
    """Everything one invocation knows, passed from stage to stage."""

    report: DisplayReport
    all: Tuple[str, ...]
    connected: Tuple[str, ...]
    active: Tuple[str, ...]
    action: Action = field(default_factory=Single)
    post_exec: Optional[str] = None
    dry_run: bool = False

    @classmethod
    def from_report(cls, report: DisplayReport) -> "RunContext":
        return cls(
            report=report,
            all=report.all,
            connected=report.connected,
            active=report.active,
        )

    def with_connected(self, connected: Sequence[str]) -> "RunContext":
        return replace(self, connected=tuple(connected))

    def with_action(self, action: Action) -> "RunContext":
        return replace(self, action=action)

    def with_options(self, post_exec: Optional[str] = None, dry_run: bool = False) -> "RunContext":
        return replace(self, post_exec=post_exec, dry_run=dry_run)

    def normalized(self) -> "RunContext":
        return replace(self, all=normalize_order(self.all, self.connected))

    def next_display_index(self) -> int:
        """Index in ``connected`` of the output after the first active one, wrapping.

        Falls back to 0 when no active output is part of ``connected``.
        """
        if not self.connected:
            return 0
        for index, name in enumerate(self.connected):
            if self.active and name == self.active[0]:
                return (index + 1) % len(self.connected)
        return 0

    def next_display(self) -> Optional[str]:
        if not self.connected:
            return None
        return self.connected[self.next_display_index()]
