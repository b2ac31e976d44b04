from importlib.metadata import PackageNotFoundError, version

from phraseclock.utils.numberwords import spell_number  # noqa: F401
from phraseclock.utils.timephrase import render_time_phrase  # noqa: F401


try:
    __version__ = version("phraseclock")
except PackageNotFoundError:
    __version__ = "unknown"
