"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``GILDEDROSE_*`` prefix
  3. Code defaults

There is no settings file; the rule tables are fixed in code.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class GildedRoseSettings(BaseSettings):
    """Settings for the gildedrose CLI, frozen after construction.

    Stored on the :class:`~gildedrose.commands._context.AppContext`
    created by the root CLI group.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GILDEDROSE_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only init kwargs and env vars; no dotenv or secrets files."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> GildedRoseSettings:
        """Construct settings from a CLI invocation.

        Flags left at their Click default (``False``) do not mask a value
        set through the environment.
        """
        return cls(**{k: v for k, v in cli_flags.items() if v})
