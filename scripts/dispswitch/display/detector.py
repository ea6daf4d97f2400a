"""Output discovery: run ``xrandr --query`` and parse its report."""

import re
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Tuple

from dispswitch.check_required_bins import BinaryChecker
from dispswitch.logging import Logger
from .config import DisplayConfig

logger = Logger(__name__)

OUTPUT_LINE = re.compile(r"^(?P<name>\S+)\s+(?P<state>connected|disconnected)\b(?P<rest>.*)$")
ACTIVE_GEOMETRY = re.compile(
    r"^\s*(?P<primary>primary\s+)?(?P<width>\d+)x(?P<height>\d+)\+(?P<x>\d+)\+(?P<y>\d+)"
)


class DiscoveryError(RuntimeError):
    """xrandr could not be found or did not produce a report."""


@dataclass(frozen=True)
class Geometry:
    width: int
    height: int
    x: int = 0
    y: int = 0

    @property
    def at_origin(self) -> bool:
        return self.x == 0 and self.y == 0

    def __str__(self) -> str:
        return f"{self.width}x{self.height}+{self.x}+{self.y}"


@dataclass(frozen=True)
class OutputInfo:
    name: str
    connected: bool
    primary: bool = False
    geometry: Optional[Geometry] = None

    @property
    def active(self) -> bool:
        return self.connected and self.geometry is not None


@dataclass(frozen=True)
class DisplayReport:
    """Verbatim xrandr text plus the outputs parsed from it, in report order."""

    raw: str
    outputs: Tuple[OutputInfo, ...] = ()

    @property
    def all(self) -> Tuple[str, ...]:
        return tuple(o.name for o in self.outputs)

    @property
    def connected(self) -> Tuple[str, ...]:
        return tuple(o.name for o in self.outputs if o.connected)

    @property
    def active(self) -> Tuple[str, ...]:
        return tuple(o.name for o in self.outputs if o.active)

    @property
    def origin_count(self) -> int:
        """Number of active outputs placed at +0+0."""
        return sum(1 for o in self.outputs if o.active and o.geometry.at_origin)

    def get(self, name: str) -> Optional[OutputInfo]:
        return next((o for o in self.outputs if o.name == name), None)


def parse_output_line(line: str) -> Optional[OutputInfo]:
    match = OUTPUT_LINE.match(line)
    if not match:
        return None

    name = match.group("name")
    if match.group("state") == "disconnected":
        return OutputInfo(name=name, connected=False)

    rest = match.group("rest")
    geometry = None
    primary = rest.lstrip().startswith("primary")
    active = ACTIVE_GEOMETRY.match(rest)
    if active:
        geometry = Geometry(
            width=int(active.group("width")),
            height=int(active.group("height")),
            x=int(active.group("x")),
            y=int(active.group("y")),
        )
    return OutputInfo(name=name, connected=True, primary=primary, geometry=geometry)


def parse_report(text: str) -> DisplayReport:
    outputs: List[OutputInfo] = []
    for line in text.splitlines():
        info = parse_output_line(line)
        if info is not None:
            outputs.append(info)
    return DisplayReport(raw=text, outputs=tuple(outputs))


class DisplayDetector:

    def __init__(self, binary: str = DisplayConfig.XRANDR_BIN):
        self.logger = logger
        self.binary = binary

    def _check_xrandr(self) -> None:
        if BinaryChecker([self.binary]).find_missing():
            raise DiscoveryError(f"{self.binary} not found on PATH")

    def get_xrandr_output(self) -> str:
        cmd = [self.binary, *DisplayConfig.QUERY_ARGS]
        self.logger.debug("running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise DiscoveryError(f"{self.binary} query failed (exit {e.returncode}): {stderr}") from e
        except OSError as e:
            raise DiscoveryError(f"failed to run {self.binary}: {e}") from e
        return result.stdout

    def detect(self) -> DisplayReport:
        self._check_xrandr()
        report = parse_report(self.get_xrandr_output())

        self.logger.debug("all outputs: %s", " ".join(report.all))
        self.logger.debug("connected outputs: %s", " ".join(report.connected))
        self.logger.debug("active outputs: %s", " ".join(report.active))
        if not report.connected:
            self.logger.warning("no connected outputs detected")
        else:
            self.logger.info(f"Detected {len(report.connected)} connected output(s)")
        return report
