import logging


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the "storefront" logger.

    Console output with a timestamped format. Calling it again only
    updates the level, no duplicate handlers are added.
    """
    logger = logging.getLogger("storefront")
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.debug("Logger initialized at %s", level)
    return logger
