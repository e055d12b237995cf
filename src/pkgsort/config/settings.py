"""Runtime settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PKGSORT_*`` prefix
  3. Code defaults

Only output and logging behaviour is configurable. The sorting thresholds
are fixed in :mod:`pkgsort.domain.thresholds` and are not read from here.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class PkgsortSettings(BaseSettings):
    """Settings for the pkgsort CLI, frozen after construction.

    Stored on the :class:`~pkgsort.commands._context.AppContext` at the CLI
    root level.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PKGSORT_",
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
        """Init kwargs, then environment; no dotenv or secrets files."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> PkgsortSettings:
        """Construct settings from a CLI invocation.

        Flags left at their ``False`` default are dropped so that an
        environment variable can still turn them on.
        """
        overrides = {name: value for name, value in cli_flags.items() if value}
        return cls(**overrides)
