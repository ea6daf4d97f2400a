"""Layout strategies: turn a resolved action into an output plan."""

from abc import ABC, abstractmethod
from typing import List, Tuple

from dispswitch.logging import Logger
from .actions import Clone, Cycle, Extend, LayoutAction, Single, Status
from .config import DisplayConfig
from .context import RunContext
from .generator import STATE_AUTO, STATE_MODE, STATE_OFF, OutputSetting
from .status import CLONED, classify_layout

logger = Logger(__name__)

Plan = List[OutputSetting]


class LayoutStrategy(ABC):
    def __init__(self):
        self.logger = Logger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def plan(self, ctx: RunContext, action: LayoutAction) -> Plan:
        pass

    def _chain(self, ctx: RunContext, state: str, mode=None, relation=None) -> Plan:
        """Walk ``all``: switch off outputs not connected, enable connected ones.

        Every enabled output after the first gets ``relation`` to the previously
        enabled one.
        """
        plan: Plan = []
        previous = None
        for name in ctx.all:
            if name not in ctx.connected:
                plan.append(OutputSetting(name, STATE_OFF))
                continue
            if previous is not None and relation:
                plan.append(OutputSetting(name, state, mode=mode, relation=relation, relative_to=previous))
            else:
                plan.append(OutputSetting(name, state, mode=mode))
            previous = name
        return plan


class SingleLayout(LayoutStrategy):
    def resolve_target(self, ctx: RunContext, action: Single):
        if not action.is_auto:
            return action.target
        target = ctx.next_display()
        self.logger.debug("auto target resolved to %s", target)
        return target

    def plan(self, ctx: RunContext, action: Single) -> Plan:
        target = self.resolve_target(ctx, action)
        if target is None:
            self.logger.warning("no connected output to enable; every output will be switched off")
        self.logger.info("single output: %s", target)
        return [
            OutputSetting(name, STATE_AUTO if name == target else STATE_OFF)
            for name in ctx.all
        ]


class ExtendLayout(LayoutStrategy):
    def plan(self, ctx: RunContext, action: Extend) -> Plan:
        self.logger.info("extending %s (%s)", " ".join(ctx.connected), action.position)
        return self._chain(ctx, STATE_AUTO, relation=action.position)


class CloneLayout(LayoutStrategy):
    def plan(self, ctx: RunContext, action: Clone) -> Plan:
        self.logger.info("cloning %s at %s", " ".join(ctx.connected), action.mode)
        return self._chain(ctx, STATE_MODE, mode=action.mode, relation="same-as")


class LayoutFactory:
    """Returns the strategy for an action type."""

    _mapping = {
        Single: SingleLayout,
        Extend: ExtendLayout,
        Clone: CloneLayout,
    }

    @classmethod
    def get(cls, action: LayoutAction) -> LayoutStrategy:
        ctor = cls._mapping.get(type(action))
        if not ctor:
            raise ValueError(f"No layout for action: {action!r}")
        return ctor()


def resolve_cycle(ctx: RunContext) -> LayoutAction:
    """Pick the next layout in single -> extend -> clone -> single from the current one."""
    if len(ctx.active) == 1:
        if ctx.next_display_index() == 0:
            return Extend(DisplayConfig.DEFAULT_POSITION)
        return Single(DisplayConfig.AUTO_TARGET)
    if classify_layout(ctx.report) == CLONED:
        target = next((name for name in ctx.active if name in ctx.connected), None)
        return Single(target or DisplayConfig.AUTO_TARGET)
    return Clone(DisplayConfig.DEFAULT_CLONE_MODE)


def resolve_action(ctx: RunContext) -> LayoutAction:
    """Reduce the context's action to one of Single, Extend or Clone."""
    action = ctx.action
    if isinstance(action, Status):
        raise ValueError("status does not change the layout")
    if isinstance(action, Cycle):
        action = resolve_cycle(ctx)
        logger.debug("cycle resolved to %r", action)
    if len(ctx.connected) == 1 and not isinstance(action, Single):
        logger.debug("only %s connected, falling back to single", ctx.connected[0])
        action = Single(DisplayConfig.AUTO_TARGET)
    return action


def plan_layout(ctx: RunContext) -> Tuple[LayoutAction, Plan]:
    action = resolve_action(ctx)
    return action, LayoutFactory.get(action).plan(ctx, action)
