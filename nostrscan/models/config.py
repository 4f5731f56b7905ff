"""Pydantic models for nostrscan configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_validator

ReferenceKind = Literal["media", "links", "quotes", "hashtags", "mentions"]

ALL_KINDS: tuple[ReferenceKind, ...] = ("media", "links", "quotes", "hashtags", "mentions")


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: Literal["table", "json"] = "table"
    kinds: list[ReferenceKind] = list(ALL_KINDS)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


class WebConfig(BaseModel):
    """Web API configuration."""

    host: str = "127.0.0.1"
    port: int = 5180


class NostrscanConfig(BaseModel):
    """Top-level nostrscan configuration."""

    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
    web: WebConfig = WebConfig()
