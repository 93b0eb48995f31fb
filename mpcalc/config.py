"""Calculator settings.

Settings come from keyword arguments or from the environment:
- MPCALC_PRECISION: working precision in decimal digits (default 32)
- MPCALC_STRICT_RESOLUTION: reject calls whose argument implementations are
  incomparable instead of keeping the first one seen (default false)
"""

import os
from typing import Final, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import SettingsError

ENV_PRECISION: Final[str] = "MPCALC_PRECISION"
ENV_STRICT_RESOLUTION: Final[str] = "MPCALC_STRICT_RESOLUTION"

DEFAULT_PRECISION: Final[int] = 32

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


class CalculatorSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    precision: int = Field(DEFAULT_PRECISION, gt=0, description="working precision in decimal digits")
    strict_resolution: bool = False

    @field_validator("strict_resolution", mode="before")
    @classmethod
    def _parse_flag(cls, v):
        if isinstance(v, str):
            s = v.strip().lower()
            if s in _TRUE:
                return True
            if s in _FALSE:
                return False
            raise ValueError(f"expected a boolean flag, got {v!r}")
        return v


def load_settings(environ: Optional[Mapping[str, str]] = None, **overrides) -> CalculatorSettings:
    """Build settings from the environment, with keyword overrides taking priority."""
    env = os.environ if environ is None else environ
    values = {}
    if ENV_PRECISION in env:
        values["precision"] = env[ENV_PRECISION]
    if ENV_STRICT_RESOLUTION in env:
        values["strict_resolution"] = env[ENV_STRICT_RESOLUTION]
    values.update(overrides)
    try:
        return CalculatorSettings(**values)
    except ValidationError as e:
        raise SettingsError(f"Invalid calculator settings: {e}") from e
