import logging
import sys
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler


class EffectHighlighter(RegexHighlighter):
    """Bold for `quoted` names, colour for the variant a value ended up in."""
    highlights = [
        r"`(?P<bold>[^`]*)`",
        r"(?P<red>\b(?:Left|Nothing)\b)",
        r"(?P<green>\b(?:Right|Some)\b)",
    ]


def logger(name: str | None = None) -> logging.Logger:
    if name is None:
        return logging.getLogger("deferio")
    return logging.getLogger("deferio").getChild(name)


def configure_logger(debug: bool, rich: bool = True):
    level = logging.DEBUG if debug else logging.INFO
    if rich:
        logging.basicConfig(
            level=level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(show_path=debug, highlighter=EffectHighlighter())],
        )
    else:
        logging.basicConfig(
            level=level,
            format="%(levelname)s %(name)s: %(message)s",
            handlers=[logging.StreamHandler(sys.stdout)],
        )
