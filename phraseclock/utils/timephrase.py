"""Turn an hour and a minute into the lines of a colloquial time phrase.

    >>> render_time_phrase(9, 34)
    ["It's", 'twenty six', 'minutes', 'to ten']
    >>> render_time_phrase(11, 30)
    ["It's", 'half', "past eleven o'clock"]

Every call returns a fresh list.  Line one is the configured preamble, the
last line names the hour.  In between there is a minute line (skipped on
the hour) and, for minutes 21..29 and 31..39, a line of its own for the
"minutes" word that the numeral line leaves off.
"""

from oslo_config import cfg

from phraseclock import conf  # noqa: F401
from phraseclock import exception
from phraseclock.utils import trace
from phraseclock.utils.numberwords import spell_number


CONF = cfg.CONF

# index is the hour on a 12 hour dial, 0 and 12 are both twelve.
# "tree" is a long standing misspelling kept as the default, see
# the phrase.correct_three_spelling option.
HOUR_WORDS = (
    "twelve",
    "one",
    "two",
    "tree",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
)

QUARTER = "quarter"
HALF = "half"
OCLOCK = "o'clock"
PAST = "past"
TO = "to"

# offsets whose numeral is shown without a unit word
BARE_OFFSETS = range(21, 30)


def _check_time(hour, minute):
    for value in (hour, minute):
        if isinstance(value, bool) or not isinstance(value, int):
            raise exception.InvalidTimeError(hour, minute)
    if not 0 <= hour <= 23 or not 0 <= minute <= 59:
        raise exception.InvalidTimeError(hour, minute)


def to_12_hour(hour):
    """Map a 0..23 hour onto the 1..12 dial."""
    result = hour % 12
    return 12 if result == 0 else result


def minute_offset(minute):
    """Minutes to count, either past the hour or to the next one."""
    if minute > 30:
        return 30 - minute % 30
    return minute


def hour_word(hour):
    """Word for any 0..23 hour on the 12 hour dial."""
    hour = to_12_hour(hour)
    if hour == 3 and CONF.phrase.correct_three_spelling:
        return "three"
    return HOUR_WORDS[hour]


def _unit_word(count):
    return "minute" if count % 10 == 1 else "minutes"


def needs_unit_line(minute):
    return minute_offset(minute) in BARE_OFFSETS


def preamble_line():
    return CONF.phrase.preamble


def minute_line(minute):
    if minute == 30:
        return HALF
    if minute in (15, 45):
        return QUARTER

    offset = minute_offset(minute)
    words = spell_number(offset)
    if offset in BARE_OFFSETS:
        return words
    return f"{words} {_unit_word(offset)}"


def unit_line(minute):
    # chosen from the clock minute, not the offset
    return _unit_word(minute)


def hour_line(hour, minute):
    hour = to_12_hour(hour)
    if minute > 30:
        text = f"{TO} {hour_word(hour % 12 + 1)}"
    elif minute > 0:
        text = f"{PAST} {hour_word(hour)}"
    else:
        text = hour_word(hour)

    if minute in (0, 30):
        text = f"{text} {OCLOCK}"
    return text


@trace.trace
def render_time_phrase(hour: int, minute: int) -> list:
    """Build the lines describing ``hour``:``minute``.

    :param hour: wall clock hour, 0..23
    :param minute: 0..59
    :raises InvalidTimeError: when either value is out of range
    :returns: list of 2 to 4 strings, one per display line
    """
    _check_time(hour, minute)

    lines = [preamble_line()]
    if minute > 0:
        lines.append(minute_line(minute))
        if needs_unit_line(minute):
            lines.append(unit_line(minute))
    lines.append(hour_line(hour, minute))
    return lines


def render_datetime(when):
    """render_time_phrase() for a datetime.datetime or datetime.time."""
    return render_time_phrase(when.hour, when.minute)
