"""Kernel computation types — public re-export surface.

Modules:
  try_.py   — Success, Failure, Lazy, Try, of, lazy, attempt
  option.py — Some, Nothing, Option
"""

from tryable.kernel.types.option import Nothing, Option, Some
from tryable.kernel.types.try_ import Failure, Lazy, Success, Try, attempt, lazy, of

__all__ = [
    "Failure",
    "Lazy",
    "Nothing",
    "Option",
    "Some",
    "Success",
    "Try",
    "attempt",
    "lazy",
    "of",
]
