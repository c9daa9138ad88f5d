"""Console logging setup with rich output."""
import logging

from rich.logging import RichHandler

_configured = False


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def init_logging(level: str | int = "INFO") -> None:
    """Attach a single rich console handler to the root logger."""
    global _configured
    root = logging.getLogger()
    root.setLevel(_parse_level(level))
    if _configured:
        return
    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    _configured = True
