# app/errors.py


class SpeedforceError(Exception):
    """Base class for errors raised by the typing test."""


class TextProviderError(SpeedforceError):
    """The remote text source could not supply a usable text."""


class ScoreStoreError(SpeedforceError):
    """Reading or writing the best score failed."""


class TextFileError(SpeedforceError):
    """A custom text file could not be read."""
