import logging

import loguru

logger = loguru.logger


class InterceptHandler(logging.Handler):
    """
    hand records of the standard logging module over to loguru

    the shell's modules log through `logging.getLogger(__name__)`, this keeps
    loguru in charge of where those records end up while still crediting the
    module and line that logged them.

    source: https://loguru.readthedocs.io/en/stable/overview.html#entirely-compatible-with-standard-logging
    """

    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # walk out of the logging package to the frame that made the call
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def install(level=logging.DEBUG):
    """route every logging record at `level` or above through loguru"""
    logging.basicConfig(handlers=[InterceptHandler()], level=level, force=True)
