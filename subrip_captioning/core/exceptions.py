"""Custom exceptions for the SubRip parser and builder."""

class SubripError(Exception):
    """Base exception for SubRip parsing and building errors."""
    pass

class ConfigurationError(SubripError):
    """Exception raised for configuration errors."""
    pass

class InvalidOptionKey(ConfigurationError):
    """Exception raised when build options contain a key that is not recognised."""

    def __init__(self, keys):
        self.keys = sorted(keys)
        super().__init__(f"Options contain keys that are not allowed: {', '.join(self.keys)}")

class TimecodeError(SubripError, ValueError):
    """Exception raised for text that cannot be read as a timecode."""
    pass

class TimelineOrderingViolation(SubripError):
    """Exception raised in strict mode when a cue starts after it ends,
    or before the previous cue has ended."""

    def __init__(self, start: str, end: str, message: str = None):
        self.start = start
        self.end = end
        super().__init__(message or f"Timeline out of order: {start} --> {end}")
