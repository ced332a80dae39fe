"""
logs.py – one-shot root logger setup, called from the app lifespan
"""

import logging

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Attach a stream handler to the root logger once.

    Uvicorn installs its own handlers on its loggers; ours only cover the
    app's module loggers (`logging.getLogger("users")` etc.).
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
