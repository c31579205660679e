from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

OpenGraphTypeRule = Literal["website", "article", "book", "profile"]
DeterminerRule = Literal["a", "an", "the", "auto", "blank", ""]


class ImageRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    url: str | None = None
    secure_url: str | None = None
    type: str | None = None
    width: int | None = Field(default=None, ge=0)
    height: int | None = Field(default=None, ge=0)
    alt: str | None = None

class VideoRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    url: str | None = None
    secure_url: str | None = None
    mime: str | None = None
    width: int | None = Field(default=None, ge=0)
    height: int | None = Field(default=None, ge=0)
    alt: str | None = None

class AudioRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    url: str | None = None
    secure_url: str | None = None
    mime: str | None = None

class OpenGraphDefaults(BaseModel):
    """Site-wide og:* defaults. Detail fields (author, isbn, ...) are page-only."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    type: OpenGraphTypeRule | None = None
    url: str | None = None
    description: str | None = None
    determiner: DeterminerRule | None = None
    image: str | ImageRules | list[str | ImageRules] | None = None
    audio: str | AudioRules | list[str | AudioRules] | None = None
    video: str | VideoRules | list[str | VideoRules] | None = None
    locale: str | None = Field(default=None, pattern=r"^[a-z]{2,3}_[A-Z]{2}$")
    locale_alternate: str | list[str] | None = None
    site_name: str | None = None

    def as_attributes(self) -> dict[str, Any]:
        # Only keys present in the file.
        return self.model_dump(exclude_unset=True)

class Rules(BaseModel):
    opengraph: OpenGraphDefaults = Field(default_factory=OpenGraphDefaults)
