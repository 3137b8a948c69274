"""Interface definitions for b64value.

This package contains Protocol definitions that describe the engine and
serialization seams of the library.
"""

from .encoding import IEngine, IJsonScalar

__all__ = [
    "IEngine",
    "IJsonScalar",
]
