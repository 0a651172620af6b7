"""
Schema definitions for the CDKTF application.

This module provides the configuration class used by the entry point to
decide which stack to synthesize and where the output is written.
"""

import os
from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._unpack_tags import unpack_tags

env_prefix = "CDKTF_APP_"

DEFAULT_OUTDIR = "cdktf.out"


class _CdktfAppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", env_prefix=env_prefix
    )
    stack_name: Optional[str] = None
    outdir: Optional[str] = None
    extra_tags_str: Optional[str] = None  # in the format "key1=value1;key2=value2"


class CdktfAppConfig(BaseModel, frozen=True):
    """
    Configuration for a CDKTF application run.

    Attributes:
        stack_name: Identifier of the stack registered under the app
            (optional, defaults to the name of the project directory)
        outdir: Directory the synthesized output is written to
            (optional, defaults to CDKTF_OUTDIR or cdktf.out)
        tags: tuple of 2-tuples of tags exposed to the stack
    """

    stack_name: str
    outdir: str
    tags: Tuple[Tuple[str, str], ...]

    @classmethod
    def from_settings(cls, **kwargs):
        """Create an instance from environment settings with optional overrides."""
        settings = _CdktfAppSettings()

        params = {
            "stack_name": settings.stack_name,
            "outdir": settings.outdir,
            "tags": unpack_tags(settings.extra_tags_str),
        }

        # Override with any provided kwargs
        params.update(kwargs)

        if params["stack_name"] is None:
            params["stack_name"] = Path.cwd().name

        if not params["stack_name"].strip():
            raise ValueError(
                "Stack name must not be empty. Set it in settings,"
                f" or as an environment variable {env_prefix}STACK_NAME."
            )

        if params["outdir"] is None:
            params["outdir"] = os.getenv("CDKTF_OUTDIR", DEFAULT_OUTDIR)

        return cls(**params)
