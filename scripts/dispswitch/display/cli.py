"""CLI entry point for the display layout switcher."""

import argparse
from typing import List, Optional, Sequence

from dispswitch import __version__
from dispswitch.logging import Logger, set_verbosity
from .actions import Action, Clone, Cycle, Extend, Single, Status
from .config import DisplayConfig
from .detector import DiscoveryError
from .manager import DisplayManager

logger = Logger(__name__)

ACTION_FLAGS = "--single, --extend, --clone, --cycle"


class UsageError(Exception):
    """Bad, missing or conflicting command-line values."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


class _ActionFlag(argparse.Action):
    """Record each layout flag in order so conflicts can be reported after parsing."""

    def __init__(self, option_strings, dest, kind, **kwargs):
        self.kind = kind
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        seen = list(getattr(namespace, self.dest, None) or [])
        seen.append((self.kind, values, option_string))
        setattr(namespace, self.dest, seen)


def parse_args(argv: Optional[list] = None):
    parser = _ArgumentParser(
        prog="dispswitch",
        allow_abbrev=False,
        description="Switch between single, extended and cloned xrandr layouts",
    )
    parser.set_defaults(actions=None)
    parser.add_argument("-s", "--single", dest="actions", action=_ActionFlag, kind="single",
                        nargs="?", const=None, metavar="NAME",
                        help="enable only NAME, or the next output after the active one ('auto', default)")
    parser.add_argument("-e", "--extend", dest="actions", action=_ActionFlag, kind="extend",
                        nargs="?", const=None, metavar="POSITION",
                        help="extend across connected outputs: left, right, above or below (default: left)")
    parser.add_argument("-c", "--clone", dest="actions", action=_ActionFlag, kind="clone",
                        nargs="?", const=None, metavar="MODE",
                        help=f"clone connected outputs at MODE (default: {DisplayConfig.DEFAULT_CLONE_MODE})")
    parser.add_argument("-C", "--cycle", dest="actions", action=_ActionFlag, kind="cycle", nargs=0,
                        help="advance single -> extend -> clone -> single")
    parser.add_argument("-d", "--displays", metavar="A:B:...",
                        help="colon-separated connected outputs to use, in this order")
    parser.add_argument("-S", "--status", action="store_true", help="print the current layout and exit")
    parser.add_argument("-E", "--post-exec", metavar="CMD",
                        help="shell command to run after a successful switch (use --post-exec=CMD when CMD starts with -)")
    parser.add_argument("-n", "--dry-run", action="store_true", help="print the xrandr command instead of running it")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable info logging")
    parser.add_argument("-D", "--debug", action="store_true", help="enable debug logging")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)


def build_action(actions: Optional[Sequence[tuple]]) -> Action:
    """Turn the recorded layout flags into one action, validating values that need no discovery."""
    if not actions:
        return Single(DisplayConfig.AUTO_TARGET)
    if len(actions) > 1:
        flags = " ".join(option for _, _, option in actions)
        raise UsageError(f"only one of {ACTION_FLAGS} may be given (got {flags})")

    kind, value, _ = actions[0]
    if kind == "single":
        return Single(value or DisplayConfig.AUTO_TARGET)
    if kind == "extend":
        if value is None:
            return Extend(DisplayConfig.DEFAULT_POSITION)
        position = DisplayConfig.POSITION_ALIASES.get(value)
        if position is None:
            raise UsageError(f"invalid extend position '{value}' (expected left, right, above or below)")
        return Extend(position)
    if kind == "clone":
        if value is None:
            return Clone(DisplayConfig.DEFAULT_CLONE_MODE)
        if not DisplayConfig.MODE_PATTERN.match(value):
            raise UsageError(f"invalid clone mode '{value}' (expected WIDTHxHEIGHT)")
        return Clone(value)
    return Cycle()


def select_action(args) -> Action:
    """Status wins over any layout flag; otherwise the single layout flag given."""
    if args.status:
        return Status()
    return build_action(args.actions)


def resolve_displays(value: str, connected: Sequence[str]) -> List[str]:
    names = value.split(DisplayConfig.DISPLAYS_SEPARATOR)
    for name in names:
        if name not in connected:
            raise UsageError(f"display '{name}' is not connected")
    return names


def validate_target(action: Action, connected: Sequence[str]) -> None:
    if isinstance(action, Single) and not action.is_auto and action.target not in connected:
        raise UsageError(f"display '{action.target}' is not connected")


def run(argv: Optional[list] = None, manager: Optional[DisplayManager] = None) -> int:
    args = parse_args(argv)
    set_verbosity(verbose=args.verbose, debug=args.debug)

    manager = manager or DisplayManager()

    action = select_action(args)
    if isinstance(action, Status):
        manager.show_status(manager.discover())
        return 0

    ctx = manager.discover()

    if args.displays is not None:
        ctx = ctx.with_connected(resolve_displays(args.displays, ctx.connected))
        logger.debug("connected outputs overridden: %s", " ".join(ctx.connected))

    validate_target(action, ctx.connected)
    ctx = ctx.with_action(action)
    ctx = ctx.with_options(post_exec=args.post_exec, dry_run=args.dry_run)

    if not manager.apply(ctx):
        logger.error("failed to apply display layout")
        return 1
    return 0


def main(argv: Optional[list] = None) -> int:
    try:
        return run(argv)
    except UsageError as e:
        logger.error(str(e))
        return 1
    except DiscoveryError as e:
        logger.error(str(e))
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
