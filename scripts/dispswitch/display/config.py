import re


class DisplayConfig:
    # xrandr invocation
    XRANDR_BIN = "xrandr"
    QUERY_ARGS = ("--query",)

    # Layout defaults
    AUTO_TARGET = "auto"
    DEFAULT_POSITION = "left-of"
    DEFAULT_CLONE_MODE = "1920x1080"

    # -e/--extend accepted tokens and their xrandr relation flag
    POSITION_ALIASES = {
        "left": "left-of",
        "right": "right-of",
        "above": "above",
        "below": "below",
    }
    RELATIONS = ("left-of", "right-of", "above", "below", "same-as")

    # WxH optionally followed by anything (e.g. a refresh rate suffix)
    MODE_PATTERN = re.compile(r"^\d+x\d+")

    DISPLAYS_SEPARATOR = ":"
