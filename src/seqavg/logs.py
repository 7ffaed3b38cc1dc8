# one place to set up the package logger, module loggers under "seqavg" propagate to it

import logging

def get_logger(name):
    logger = logging.getLogger(name)
    # repeated calls must not stack handlers
    if not logger.handlers:
        formatter = logging.Formatter("%(levelname)s: %(message)s")
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    return logger
