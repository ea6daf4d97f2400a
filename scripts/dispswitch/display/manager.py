"""Display layout manager - main module."""

import subprocess
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from dispswitch.logging import Logger
from .context import RunContext
from .detector import DisplayDetector
from .generator import OutputSetting, XrandrCommandGenerator
from .layouts import plan_layout
from .status import THEME, render_status

logger = Logger(__name__)


class DisplayManager:

    def __init__(self, detector: Optional[DisplayDetector] = None, generator: Optional[XrandrCommandGenerator] = None):
        self.logger = logger
        self.detector = detector or DisplayDetector()
        self.generator = generator or XrandrCommandGenerator(self.detector.binary)
        self.console = Console(theme=THEME, highlight=False, soft_wrap=True)

    def discover(self) -> RunContext:
        return RunContext.from_report(self.detector.detect())

    def show_status(self, ctx: RunContext) -> str:
        return render_status(ctx.report, self.console)

    def build_plan(self, ctx: RunContext) -> List[OutputSetting]:
        action, plan = plan_layout(ctx.normalized())
        self.logger.debug("resolved action: %r", action)
        return plan

    def run_xrandr(self, args: List[str]) -> bool:
        self.logger.info("running: %s", " ".join(args))
        try:
            subprocess.run(args, check=True)
        except subprocess.CalledProcessError as e:
            self.logger.error(f"xrandr failed with exit code {e.returncode}")
            return False
        except OSError as e:
            self.logger.error(f"failed to run xrandr: {e}")
            return False
        return True

    def run_post_exec(self, command: str) -> None:
        self.logger.info("post-exec: %s", command)
        result = subprocess.run(command, shell=True, check=False)
        self.logger.debug("post-exec exited with %s", result.returncode)

    def apply(self, ctx: RunContext) -> bool:
        """Issue the one xrandr command for the context's action, then the post-exec hook."""
        plan = self.build_plan(ctx)

        if ctx.dry_run:
            self.console.print(escape(self.generator.generate_commands(plan)))
            return True

        args = self.generator.generate_args(plan)

        if not self.run_xrandr(args):
            return False

        if ctx.post_exec:
            self.run_post_exec(ctx.post_exec)
        return True
