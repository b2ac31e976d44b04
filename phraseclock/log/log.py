import inspect
import logging
import sys

from loguru import logger
from oslo_config import cfg

from phraseclock.conf import log as conf_log

CONF = cfg.CONF


class InterceptHandler(logging.Handler):
    """Hand stdlib logging records over to loguru."""

    def emit(self, record):
        # get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # find caller from where originated the logged message
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage(),
        )


def _console_handler(log_level):
    return {
        'sink': sys.stdout if CONF.logging.enable_console_stdout else sys.stderr,
        'serialize': False,
        'format': CONF.logging.logformat,
        'colorize': CONF.logging.enable_color,
        'level': log_level,
    }


# Setup the log faciility
# to disable log to the console, but still log to file
# use the --quiet option on the cmdln
def setup_logging(loglevel=None, quiet=False, custom_handler=None):
    if not loglevel:
        loglevel = CONF.logging.log_level
    log_level = conf_log.LOG_LEVELS[loglevel.upper()]

    # intercept everything at the root logger
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(log_level)

    # remove every other logger's handlers
    # and propagate to root logger
    for name in logging.root.manager.loggerDict.keys():
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True

    handlers = []
    if not quiet:
        handlers.append(_console_handler(log_level))

    if CONF.logging.logfile:
        handlers.append(
            {
                'sink': CONF.logging.logfile,
                'serialize': False,
                'format': CONF.logging.logformat,
                'colorize': False,
                'level': log_level,
            },
        )

    if custom_handler:
        handlers.append(custom_handler)

    # configure loguru
    logger.configure(handlers=handlers)
    logger.level('DEBUG', color='<fg #BABABA>')
