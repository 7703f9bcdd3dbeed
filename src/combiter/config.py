import os
from dataclasses import dataclass
from functools import cache

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)

    if raw is None:
        return default

    value = raw.strip().lower()

    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class CombiterConfig:
    """Process-wide switches for the combinators' precondition checks."""

    check_reiterable: bool = True  # inspect sources that get restarted
    strict: bool = False  # raise NotReiterableError instead of warning

    @classmethod
    def from_env(cls) -> "CombiterConfig":
        """
        Reads COMBITER_CHECK_REITERABLE and COMBITER_STRICT, falling back to
        the dataclass defaults for unset variables.
        """
        return cls(
            check_reiterable=_env_flag(
                "COMBITER_CHECK_REITERABLE", cls.check_reiterable
            ),
            strict=_env_flag("COMBITER_STRICT", cls.strict),
        )


@cache
def get_config() -> CombiterConfig:
    """The environment is read once, on first use."""
    return CombiterConfig.from_env()
