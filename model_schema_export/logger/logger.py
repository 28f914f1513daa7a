import atexit
import json
import logging
import logging.config
from logging.handlers import QueueListener
from pathlib import Path

logger = logging.getLogger("SchemaExporter")

_CONFIG_FILE = Path(__file__).parent / "logging_config.json"
_listener: QueueListener | None = None


def _stop_listener() -> None:
    global _listener
    if _listener is not None:
        _listener.stop()
        _listener = None


def setup_logger(level: int | str | None = None) -> None:
    """Apply logging_config.json and start the queue listener.

    Calling it again replaces the previous configuration and stops the
    listener that was started for it.
    """
    global _listener

    with open(_CONFIG_FILE, encoding="utf-8") as f:
        config = json.load(f)
    if level is not None:
        config["handlers"]["stderr"]["level"] = (
            logging.getLevelName(level) if isinstance(level, int) else level.upper()
        )

    _stop_listener()
    logging.config.dictConfig(config)
    queue_handler = logging.getHandlerByName("queue_handler")
    listener = getattr(queue_handler, "listener", None)
    if listener is not None:
        listener.start()
        _listener = listener


atexit.register(_stop_listener)
