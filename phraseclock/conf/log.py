"""
The options for log setup
"""

import logging

from oslo_config import cfg

LOG_LEVELS = {
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'INFO': logging.INFO,
    'DEBUG': logging.DEBUG,
}

# loguru format pieces
LOG_FORMAT_TIMESTAMP = '<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green>'
LOG_FORMAT_LEVEL = '<level>{level: <8}</level>'
LOG_FORMAT_MESSAGE = '<level>{message}</level>'
LOG_FORMAT_LOCATION = '<cyan>{name}</cyan>:<magenta>{line}</magenta>'

DEFAULT_LOG_FORMAT = ' | '.join(
    [
        LOG_FORMAT_TIMESTAMP,
        LOG_FORMAT_LEVEL,
        LOG_FORMAT_MESSAGE,
        LOG_FORMAT_LOCATION,
    ],
)

logging_group = cfg.OptGroup(
    name='logging',
    title='Logging options',
)
logging_opts = [
    cfg.StrOpt(
        'logfile',
        default=None,
        help='File to also send the log to.  Colors are never written '
        'to the file.',
    ),
    cfg.StrOpt(
        'logformat',
        default=DEFAULT_LOG_FORMAT,
        help='loguru format string used for every log sink.',
    ),
    cfg.StrOpt(
        'log_level',
        default='INFO',
        choices=LOG_LEVELS.keys(),
        help='Log level used when --loglevel is not passed.',
    ),
    cfg.BoolOpt(
        'enable_color',
        default=True,
        help='Colorize the console log output.',
    ),
    cfg.BoolOpt(
        'enable_console_stdout',
        default=False,
        help='Send the log to stdout next to the phrase output.  The '
        'log goes to stderr when disabled.',
    ),
]


def register_opts(config):
    config.register_group(logging_group)
    config.register_opts(logging_opts, group=logging_group)


def list_opts():
    return {
        logging_group.name: logging_opts,
    }
