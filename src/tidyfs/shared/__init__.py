# Where: tidyfs.shared.__init__
# What: Provide a concise import surface for shared errors and helpers.
# Why: Encourage consistent reuse of shared helpers across features.

"""Shared cross-cutting utilities exposed at the package level."""

from .cancellation import CancellationToken, check_cancelled
from .errors import OperationCancelledError, ResolutionExhaustedError, TidyFsError
from .path_helpers import replacing_suffix, stem_without_extension

__all__ = [
    "CancellationToken",
    "check_cancelled",
    "OperationCancelledError",
    "ResolutionExhaustedError",
    "TidyFsError",
    "replacing_suffix",
    "stem_without_extension",
]
