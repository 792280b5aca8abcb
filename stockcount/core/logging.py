# stockcount/core/logging.py
import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Minimal unified logging:
    - root logger level
    - single stdout handler, existing handlers dropped to avoid duplicates
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
