"""Board configuration for the setup CLI."""

from __future__ import annotations

import os
from typing import Any, Dict

from pydantic import BaseModel, Field


class SetupConfig(BaseModel):
    """Dimensions of the board the fleet is placed on."""

    width: int = Field(default=10, gt=0)
    height: int = Field(default=10, gt=0)

    @classmethod
    def from_env(cls, **overrides: Any) -> "SetupConfig":
        """Construct config from `FLEETSETUP_BOARD_*` env vars.

        Explicit overrides win over the environment; ``None`` overrides are
        ignored so unset CLI flags fall through.
        """

        data: Dict[str, Any] = {}
        env_fields = {
            "width": "FLEETSETUP_BOARD_WIDTH",
            "height": "FLEETSETUP_BOARD_HEIGHT",
        }
        for field, env_name in env_fields.items():
            value = os.getenv(env_name)
            if value is not None and value.strip():
                data[field] = value.strip()

        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**data)
