"""
Decoder settings.
"""

from dataclasses import dataclass
import os
from typing import Mapping, Optional


STRICT_ENV_VAR = "SPLICEDRUM_STRICT"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class DecodeOptions:
    """
    Options controlling how a .splice file is decoded.

    Attributes:
        strict_budget: Reject files whose tracks do not end exactly on the
            byte budget declared by the header. When False, an overshooting
            final track is accepted and a warning is logged.
    """

    strict_budget: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DecodeOptions":
        """
        Build options from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            DecodeOptions instance
        """
        environ = os.environ if environ is None else environ
        strict = environ.get(STRICT_ENV_VAR, "").strip().lower() in _TRUE_VALUES
        return cls(strict_budget=strict)
