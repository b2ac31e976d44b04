class PhraseClockException(Exception):
    """Base for all phraseclock errors."""
    message = "phraseclock error"

    def __init__(self, message=None):
        if message:
            self.message = message
        super().__init__(self.message)


class InvalidTimeError(PhraseClockException, ValueError):
    """The hour or minute handed to the phrase engine is out of range."""
    def __init__(self, hour, minute):
        self.hour = hour
        self.minute = minute
        super().__init__(
            f"Time {hour!r}:{minute!r} is out of range "
            "(hour must be 0..23, minute must be 0..59)",
        )


class UnsupportedMagnitudeError(PhraseClockException, ValueError):
    """Number is too large to spell (no trillion group)."""
    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Can't spell {value}, magnitudes of a trillion or more "
            "are not supported",
        )


class MissingConfigOptionException(PhraseClockException):
    """Missing a config option."""
    def __init__(self, config_option):
        super().__init__(f"Option '{config_option}' was not in config file")
