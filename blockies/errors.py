"""Error kinds raised while validating generation or render inputs.

Every error derives from :class:`IdenticonError`, itself a ``ValueError``, so
callers that already guard against ``ValueError`` keep working. Validation
always happens before any random draw, so a failure never leaves a partially
built descriptor behind.
"""


class IdenticonError(ValueError):
    """Base class for invalid identicon inputs."""


class InvalidDimensionError(IdenticonError):
    """Grid size or render scale is not a positive integer."""

    def __init__(self, name: str, value: object):
        super().__init__(f"{name} must be a positive integer, got {value!r}")
        self.name = name
        self.value = value


class InvalidOverrideColorError(IdenticonError):
    """Override color string cannot be parsed as a color."""

    def __init__(self, slot: str, value: object):
        super().__init__(f"Invalid {slot} override: {value!r}")
        self.slot = slot
        self.value = value
