from . import cols                   # noqa: F401
from .progress import ProgressBar    # noqa: F401

__all__ = [
    'cols',
    'ProgressBar',
]
