"""
Settings model — user configuration loaded from config.yml.

Every field has a default, so an absent or empty config file yields a
fully usable Settings object.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from adaptive.core.models.platform import Platform


class InstallSettings(BaseModel):
    """How install commands are run."""

    prefer: list[str] = Field(default_factory=list)
    sudo: Literal["auto", "always", "never"] = "auto"
    timeout: int | None = Field(default=None, gt=0)
    dry_run: bool = False
    stream_output: bool = True

    @field_validator("prefer", mode="before")
    @classmethod
    def _strip_flag_prefix(cls, value: object) -> object:
        # Accept both "snap" and "--prefer-snap" spellings.
        if isinstance(value, str):
            value = [value]
        if isinstance(value, list):
            return [
                v.removeprefix("--prefer-").strip().lower() if isinstance(v, str) else v
                for v in value
            ]
        return value


class ToolSpec(BaseModel):
    """Name variants for one installable tool.

    ``install`` maps a platform name (or ``_default``) to candidate
    package names, most likely to exist first.
    """

    homepage: str = ""
    install: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("install")
    @classmethod
    def _known_platforms(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        # Aliases (ubuntu, mac, rhel) are stored under their platform name
        return {
            key if key == "_default" else Platform.parse(key).value: names
            for key, names in value.items()
        }


class Settings(BaseModel):
    """Root configuration object."""

    platform: Platform | None = None
    install: InstallSettings = Field(default_factory=InstallSettings)
    tools: dict[str, ToolSpec] = Field(default_factory=dict)

    @field_validator("platform", mode="before")
    @classmethod
    def _parse_platform(cls, value: object) -> object:
        if isinstance(value, str):
            return Platform.parse(value)
        return value
