"""Utility functions for splicedrum."""

from splicedrum.utils.validation import (
    BudgetMismatchError,
    SignatureMismatchError,
    SizeUnderflowError,
    SpliceDecodeError,
    TruncatedInputError,
)
from splicedrum.utils.logger import setup_logger

__all__ = [
    "BudgetMismatchError",
    "SignatureMismatchError",
    "SizeUnderflowError",
    "SpliceDecodeError",
    "TruncatedInputError",
    "setup_logger",
]
