"""Utilities and helper functions."""

# Make these available by anyone importing
# phraseclock.utils
from .numberwords import spell_number  # noqa: F401
from .timephrase import render_time_phrase  # noqa: F401
