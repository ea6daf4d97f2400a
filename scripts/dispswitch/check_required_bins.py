#!/usr/bin/env python3

from typing import Optional

import shutil
import argparse
from dispswitch.logging import Logger, set_verbosity

logger = Logger(__name__)

DEFAULT_BINS = ["xrandr"]

PACKAGE_MAP = {
    "xrandr": "xorg-xrandr",
}


class BinaryChecker:
    def __init__(self, bins: Optional[list] = None):
        self.bins_to_check = bins or DEFAULT_BINS

    def check_exists(self, binary: str) -> bool:
        return shutil.which(binary) is not None

    def find_missing(self) -> list:
        missing = [b for b in self.bins_to_check if not self.check_exists(b)]
        if missing:
            pkgs = list(dict.fromkeys(PACKAGE_MAP.get(b, b) for b in missing))
            logger.debug("Suggested install (Arch): sudo pacman -S --needed %s", " ".join(sorted(pkgs)))
        return missing

    def check_all(self) -> bool:
        missing = self.find_missing()
        if missing:
            logger.error("missing required binaries: %s", " ".join(missing))
            return False

        logger.debug("required binaries present: %s", " ".join(self.bins_to_check))
        return True


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Check for required binaries and print suggested package names if missing")
    parser.add_argument("bins", nargs="*", help="binaries to check")
    parsed = parser.parse_args(argv)

    set_verbosity(debug=True)
    checker = BinaryChecker(parsed.bins if parsed.bins else None)
    ok = checker.check_all()
    return 0 if ok else 3


if __name__ == "__main__":
    raise SystemExit(main())
