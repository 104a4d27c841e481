from __future__ import annotations


class ResampleError(ValueError):
    """Base class for caller-input problems detected before or during a resample."""


class InvalidOption(ResampleError):
    def __init__(self, option: str, message: str):
        super().__init__(message)
        self.option = option


class LengthMismatch(ResampleError):
    pass


class OutOfRangePoints(ResampleError):
    pass


class NonMonotonicInput(ResampleError):
    pass


class TooFewPoints(ResampleError):
    pass
