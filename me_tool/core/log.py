import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s]: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configures the root logger once per process."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
