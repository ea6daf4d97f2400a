import logging
import sys

ROOT_LOGGER = "dispswitch"
DEFAULT_LEVEL = logging.WARNING

LEVEL_COLORS = {
    "DEBUG": "\x1b[36m",
    "INFO": "\x1b[32m",
    "WARNING": "\x1b[33m",
    "ERROR": "\x1b[31m",
    "CRITICAL": "\x1b[41m",
}
RESET = "\x1b[0m"


class ColoredFormatter(logging.Formatter):
    """Render ``<level>: <message>`` with a lower-cased, optionally coloured level."""

    def __init__(self, fmt: str, stream_name: str = "stdout"):
        super().__init__(fmt)
        self.stream_name = stream_name

    def _use_color(self) -> bool:
        stream = getattr(sys, self.stream_name, None)
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        color = LEVEL_COLORS.get(levelname, "") if self._use_color() else ""
        label = levelname.lower()
        record.levelname = f"{color}{label}{RESET}" if color else label
        return super().format(record)


class ConsoleHandler(logging.StreamHandler):
    """StreamHandler bound to ``sys.<stream_name>`` at emit time, not at creation."""

    def __init__(self, stream_name: str):
        self.stream_name = stream_name
        super().__init__()

    @property
    def stream(self):
        return getattr(sys, self.stream_name)

    @stream.setter
    def stream(self, value) -> None:
        pass


def _below_warning(record: logging.LogRecord) -> bool:
    return record.levelno < logging.WARNING


def _setup_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if getattr(root, "_dispswitch_configured", False):
        return root

    for handler in list(root.handlers):
        root.removeHandler(handler)

    console_format = "%(levelname)s: %(message)s"

    out_handler = ConsoleHandler("stdout")
    out_handler.addFilter(_below_warning)
    out_handler.setFormatter(ColoredFormatter(console_format, "stdout"))
    root.addHandler(out_handler)

    err_handler = ConsoleHandler("stderr")
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(ColoredFormatter(console_format, "stderr"))
    root.addHandler(err_handler)

    root.setLevel(DEFAULT_LEVEL)
    root._dispswitch_configured = True
    return root


def set_verbosity(verbose: bool = False, debug: bool = False) -> int:
    """Apply -v/-D to the whole dispswitch logger tree; debug wins over verbose."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = DEFAULT_LEVEL
    _setup_root().setLevel(level)
    return level


class Logger:
    def __init__(self, name: str):
        self.name = name
        _setup_root()
        self.logger = logging.getLogger(name)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self.logger.error(msg, *args, **kwargs)


__all__ = ["Logger", "ColoredFormatter", "set_verbosity"]
