from oslo_config import cfg

from phraseclock import exception
from phraseclock.conf import common, log


CONF = cfg.CONF

log.register_opts(CONF)
common.register_opts(CONF)


def validate():
    """Make sure the loaded config can drive the phrase engine."""
    if not CONF.phrase.preamble or not CONF.phrase.preamble.strip():
        raise exception.MissingConfigOptionException('phrase.preamble')

