"""Environment-driven settings for the drills CLI.

Only the console surface is configurable; the exercises themselves are not.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_TRUTHY = ("1", "true", "yes", "on")


def _flag(env: dict[str, str], key: str) -> bool:
    """Read a boolean flag like DRILLS_VERBOSE=1."""
    return env.get(key, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Console settings.

    verbose: print dim status lines on stderr around each exercise.
    no_color: disable color on the status console.
    """

    verbose: bool = False
    no_color: bool = False

    @classmethod
    def from_env(cls, env: Optional[dict[str, str]] = None) -> Settings:
        env = os.environ if env is None else env
        return cls(
            verbose=_flag(env, "DRILLS_VERBOSE"),
            no_color=_flag(env, "DRILLS_NO_COLOR") or "NO_COLOR" in env,
        )
