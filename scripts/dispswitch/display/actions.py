"""The actions a run can perform.

Exactly one of these is resolved from the command line. Each carries only
the data its layout needs.
"""

from dataclasses import dataclass
from typing import Union

from .config import DisplayConfig


@dataclass(frozen=True)
class Single:
    target: str = DisplayConfig.AUTO_TARGET

    @property
    def is_auto(self) -> bool:
        return self.target == DisplayConfig.AUTO_TARGET


@dataclass(frozen=True)
class Extend:
    position: str = DisplayConfig.DEFAULT_POSITION


@dataclass(frozen=True)
class Clone:
    mode: str = DisplayConfig.DEFAULT_CLONE_MODE


@dataclass(frozen=True)
class Cycle:
    pass


@dataclass(frozen=True)
class Status:
    pass


Action = Union[Single, Extend, Clone, Cycle, Status]
LayoutAction = Union[Single, Extend, Clone]
