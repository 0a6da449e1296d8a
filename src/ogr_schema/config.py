"""
Settings for the ogr-schema command line.

Priority chain (highest to lowest):
  1. CLI flags passed by Click (flags can only switch options on)
  2. Env vars with the ``OGR_SCHEMA_`` prefix
  3. Code defaults
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaSettings(BaseSettings):
    """
    Unified settings for the ogr-schema CLI.

    Attributes:
        verbose: Emit DEBUG logs from ogr_schema
        log_json: Render logs as JSON lines instead of console output
        output_json: Print command results as JSON by default
        default_driver: OGR driver used by ``clone-schema`` when none is given
    """

    model_config = SettingsConfigDict(env_prefix="OGR_SCHEMA_", frozen=True)

    verbose: bool = False
    log_json: bool = False
    output_json: bool = False
    default_driver: str = Field(default="GPKG", min_length=1)

    @classmethod
    def from_cli(cls, **overrides: object) -> "SchemaSettings":
        """
        Build settings from CLI flags.

        Flags only switch options on, so unset (None/False) flags leave the
        environment value in place.
        """
        return cls(**{k: v for k, v in overrides.items() if v})
