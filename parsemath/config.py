import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from .parser import DEFAULT_MAX_DEPTH

ENV_PREFIX = "PARSEMATH_"


class Settings(BaseModel):
    max_depth: int = Field(DEFAULT_MAX_DEPTH, gt=0)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _upper(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        return cls(**values)
