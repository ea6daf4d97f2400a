"""Switch an X11 desktop between single, extended and cloned xrandr layouts."""

__version__ = "1.0.0"

__all__ = [
    "display",
    "check_required_bins",
]
