import logging
from typing import Optional


def setup_logging(
    log_file: Optional[str],
    *,
    quiet: bool = False,
    debug: bool = False,
) -> logging.Logger:
    """Configure and return the shared `dense_blas` logger.

    By default, no file is written. Pass `log_file` to enable file logging.
    With `debug=True` every kernel call emits a DEBUG record naming the
    operation, transposition mode, matrix shape and scalars, e.g.
    `gemv(Transpose) A=3x2 alpha=2.0 beta=0.5`; the benchmark `--debug` flag
    turns this on. Shape violations are logged at ERROR regardless of level.
    """
    logger = logging.getLogger("dense_blas")
    # Keep propagation enabled so test harnesses (e.g. pytest caplog) can capture
    # records even when we suppress console output.
    logger.propagate = True

    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="w")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as exc:
            print(f"[logging] Could not open log file '{log_file}': {exc}")

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
