from oslo_config import cfg

DEFAULT_PREAMBLE = "It's"

phrase_group = cfg.OptGroup(
    name='phrase',
    title='Time phrase settings',
)

phraseclock_opts = [
    cfg.BoolOpt(
        'trace_enabled',
        default=False,
        help='Enable code tracing',
    ),
    cfg.StrOpt(
        'timezone',
        default=None,
        help='Timezone name (ex: US/Pacific) used when reading the wall '
        'clock.  If not set, the local timezone is used.',
    ),
]

phrase_opts = [
    cfg.StrOpt(
        'preamble',
        default=DEFAULT_PREAMBLE,
        help='The fixed first line shown above every time phrase.',
    ),
    cfg.BoolOpt(
        'correct_three_spelling',
        default=False,
        help="Spell the hour three as 'three' instead of the historical "
        "'tree'.",
    ),
]


def register_opts(config):
    config.register_opts(phraseclock_opts)
    config.register_group(phrase_group)
    config.register_opts(phrase_opts, group=phrase_group)


def list_opts():
    return {
        'DEFAULT': phraseclock_opts,
        phrase_group.name: phrase_opts,
    }
