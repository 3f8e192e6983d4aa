import os
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    MAX_RECURSION_DEPTH: int = Field(
        500, description="Deepest recursion the recursive examples may use."
    )
    LOG_CALLS_LEVEL: str = Field(
        "DEBUG", description="Level at which `with_log` records calls."
    )

    @field_validator("MAX_RECURSION_DEPTH")
    @classmethod
    def check_depth_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"MAX_RECURSION_DEPTH must be positive, got {v}")
        return v

    @field_validator("LOG_CALLS_LEVEL")
    @classmethod
    def check_level_known(cls, v: str) -> str:
        v = v.upper()
        if v not in _LEVELS:
            raise ValueError(f"Unknown log level {v!r}, expected one of {_LEVELS}")
        return v

    @classmethod
    def load(cls) -> "Settings":
        values = {}
        depth = os.getenv("PUREFN_MAX_RECURSION_DEPTH")
        if depth is not None:
            values["MAX_RECURSION_DEPTH"] = depth
        level = os.getenv("PUREFN_LOG_CALLS_LEVEL")
        if level is not None:
            values["LOG_CALLS_LEVEL"] = level
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.load()
