import logging
from typing import Optional

SPLIT_LOGGER = "polyface.split"


def setup_logging(
    log_file: Optional[str] = None,
    *,
    quiet: bool = False,
    debug: bool = False,
    trace_splits: bool = False,
) -> logging.Logger:
    """Configure and return the `polyface` logger.

    `trace_splits` turns on DEBUG output from the face splitter only (one
    record per cut: vertex, angle and the sizes of both halves) while the
    rest of the kernel stays at INFO. `debug` enables DEBUG everywhere.
    """
    logger = logging.getLogger("polyface")
    # Records still reach pytest's caplog when console output is off.
    logger.propagate = True
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    split_logger = logging.getLogger(SPLIT_LOGGER)
    split_logger.setLevel(logging.DEBUG if trace_splits else logging.NOTSET)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler_level = logging.DEBUG if (debug or trace_splits) else logging.INFO
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(handler_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="w")
        except OSError as exc:
            logger.warning("Could not open log file '%s': %s", log_file, exc)
        else:
            file_handler.setLevel(handler_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
