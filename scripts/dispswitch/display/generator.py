"""Translate an output plan into a single xrandr command line."""

import shlex
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .config import DisplayConfig

STATE_AUTO = "auto"
STATE_MODE = "mode"
STATE_OFF = "off"


@dataclass(frozen=True)
class OutputSetting:
    name: str
    state: str
    mode: Optional[str] = None
    relation: Optional[str] = None
    relative_to: Optional[str] = None

    def __post_init__(self):
        if self.state not in (STATE_AUTO, STATE_MODE, STATE_OFF):
            raise ValueError(f"Unknown output state: {self.state}")
        if self.state == STATE_MODE and not self.mode:
            raise ValueError(f"Output {self.name} needs a mode")
        if self.relation is not None and self.relation not in DisplayConfig.RELATIONS:
            raise ValueError(f"Unknown relation: {self.relation}")
        if (self.relation is None) != (self.relative_to is None):
            raise ValueError(f"Output {self.name}: relation and relative_to go together")

    @property
    def enabled(self) -> bool:
        return self.state != STATE_OFF

    def to_args(self) -> List[str]:
        args = ["--output", self.name]
        if self.state == STATE_OFF:
            args.append("--off")
            return args
        if self.state == STATE_MODE:
            args += ["--mode", self.mode]
        else:
            args.append("--auto")
        if self.relation:
            args += [f"--{self.relation}", self.relative_to]
        return args


class XrandrCommandGenerator:
    def __init__(self, binary: str = DisplayConfig.XRANDR_BIN):
        self.binary = binary

    def generate_args(self, plan: Sequence[OutputSetting]) -> List[str]:
        args = [self.binary]
        for setting in plan:
            args += setting.to_args()
        return args

    def generate_commands(self, plan: Sequence[OutputSetting]) -> str:
        return shlex.join(self.generate_args(plan))
