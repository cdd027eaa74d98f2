"""Runtime settings with environment overrides."""

import logging
import os
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

ENV_PREFIX = "BBS_IRC_ART_"

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    """
    Defaults shared by the loader, the image renderer and the CLI.

    Environment variables (prefix ``BBS_IRC_ART_``) override the
    defaults; explicit CLI options override both.
    """
    width: int = 80
    font_path: str | None = None
    bold_font_path: str | None = None
    font_size: int = 16
    thumbnail_scale: float = 0.5
    force_16: bool = False

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from the environment."""
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        if value := env.get(ENV_PREFIX + "WIDTH"):
            overrides["width"] = _parse(int, "WIDTH", value)
        if value := env.get(ENV_PREFIX + "FONT"):
            overrides["font_path"] = value
        if value := env.get(ENV_PREFIX + "BOLD_FONT"):
            overrides["bold_font_path"] = value
        if value := env.get(ENV_PREFIX + "FONT_SIZE"):
            overrides["font_size"] = _parse(int, "FONT_SIZE", value)
        if value := env.get(ENV_PREFIX + "THUMB_SCALE"):
            overrides["thumbnail_scale"] = _parse(float, "THUMB_SCALE", value)
        if value := env.get(ENV_PREFIX + "FORCE_16"):
            overrides["force_16"] = _parse_flag("FORCE_16", value)

        if overrides:
            logger.debug("Settings overridden from environment: %s", sorted(overrides))
        return replace(cls(), **overrides)


def _parse(kind: type, name: str, value: str):
    try:
        return kind(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be {kind.__name__}, got {value!r}") from None


def _parse_flag(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {value!r}")

