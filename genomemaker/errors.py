"""Exceptions raised by the genome and sequencer simulators.

Everything derives from GenomeMakerError so the command line can report
any failure the same way. Nothing is retried: each of these is a
deterministic consequence of the configuration or the files.
"""


class GenomeMakerError(Exception):
    """Base class for all simulator errors."""


class ConfigurationError(GenomeMakerError):
    """Invalid parameters, detected before any file is touched."""


class InvalidRange(ConfigurationError):
    """A random number range with no (or too few) values in it."""


class CapacityError(GenomeMakerError):
    """The genome can't support the requested reads."""


class InsufficientReads(CapacityError):
    """The read depth is too low to get reads out of the genome."""


class BufferTooSmall(CapacityError):
    """A chunk of genome is shorter than a single read."""


class OutOfRange(GenomeMakerError):
    """A position past the data held in the chunk buffers."""


class SequencerIOError(GenomeMakerError):
    """Opening, reading or writing a file failed."""


class InvariantViolation(GenomeMakerError):
    """Internal error. If you see this, there is a bug."""
