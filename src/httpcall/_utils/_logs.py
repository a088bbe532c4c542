import logging

from .constants import LOGGER_NAME

_HANDLER_NAME = "httpcall-console"


def setup_logging(debug: bool = False) -> None:
    """Configure console logging for the ``httpcall`` logger.

    Installs a single stream handler (calling this again only updates the
    level), logs at DEBUG when ``debug`` is set and INFO otherwise, and keeps
    the transport libraries at WARNING.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
            "%d/%m/%y %H:%M:%S",
        )
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
