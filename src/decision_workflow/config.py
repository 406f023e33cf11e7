"""Configuration for the workflow engine.

Configuration is loaded from:
- environment variables (prefix ``DECISION_WORKFLOW_``)
- and a local `.env` file (if present)

Settings are passed explicitly to each workflow; the engine never reads
global configuration on its own.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorkflowSettings(BaseSettings):
    """Settings for workflow execution.

    Environment variables:
    - DECISION_WORKFLOW_LOG_LEVEL                  (optional)
    - DECISION_WORKFLOW_SKIP_UNKNOWN_ENTRY_POINTS  (optional)
    - DECISION_WORKFLOW_STATE_PATH                 (optional)
    - DECISION_WORKFLOW_LOG_STATE_TRANSITIONS      (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `WorkflowSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )

    skip_unknown_entry_points: bool = Field(
        default=True,
        description=(
            "When replaying, skip recorded entry points the workflow no longer defines "
            "instead of failing the pass. Lets workflows evolve with entities already in "
            "flight."
        ),
    )

    state_path: Path = Field(
        default=Path("workflow_state.json"),
        description="Path of the JSON state document used by the CLI",
    )

    log_state_transitions: bool = Field(
        default=True,
        description="Log loaded and persisted state strings at INFO (otherwise DEBUG)",
    )

    model_config = SettingsConfigDict(
        env_prefix="DECISION_WORKFLOW_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
