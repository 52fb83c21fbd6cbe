from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WrapConfig(BaseModel):
    max_line_len: int = Field(default=120, gt=0, description="Maximum width of a wrapped comment line")
    delimiter: str = Field(default="// ", min_length=1, description="Prefix of every comment line")

    model_config = ConfigDict(extra="forbid")


class LinksConfig(BaseModel):
    base_url: str = Field(default="https://core.telegram.org", description="Prefix for root-relative hrefs")
    docs_url: str = Field(default="https://core.telegram.org/bots/api", description="Prefix for in-page anchors")

    model_config = ConfigDict(extra="forbid")

    @field_validator("base_url", "docs_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        # hrefs already start with "/" or "#"
        return value.rstrip("/")


class BotdocConfig(BaseModel):
    wrap: WrapConfig = Field(default_factory=WrapConfig)
    links: LinksConfig = Field(default_factory=LinksConfig)

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "BotdocConfig",
    "WrapConfig",
    "LinksConfig",
]
