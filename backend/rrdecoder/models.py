from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TypeModel(BaseModel):
    sType: int = Field(..., alias="type_id")
    sTypeDescr: str = Field(..., alias="name")
    model_config = ConfigDict(populate_by_name=True)


class FlavorModel(BaseModel):
    sFlavor: int = Field(..., alias="flavor_id")
    sFlavorDescr: str = Field(..., alias="name")
    model_config = ConfigDict(populate_by_name=True)


class VoiceModel(BaseModel):
    sVoice: int = Field(..., alias="voice_id")
    sVoiceDescr: str = Field(..., alias="name")
    model_config = ConfigDict(populate_by_name=True)


class TagModel(BaseModel):
    tagId: int = Field(..., alias="tag_id")
    tagDescr: str = Field("", alias="description")
    model_config = ConfigDict(populate_by_name=True)


class SystemModel(BaseModel):
    sid: int = Field(..., alias="system_id")
    sName: str = Field("", alias="name")
    sType: int = Field(..., alias="type_id")
    sFlavor: int = Field(..., alias="flavor_id")
    sVoice: int = Field(..., alias="voice_id")
    model_config = ConfigDict(populate_by_name=True)


class TalkgroupModel(BaseModel):
    sid: int = Field(..., alias="system_id")
    tgDec: int = Field(..., ge=0, alias="decimal_value")
    tgAlpha: str = Field("", alias="alpha_tag")
    tgDescr: str = Field("", alias="description")
    tgMode: str = Field("", alias="mode")
    tags: list[TagModel] | None = None
    model_config = ConfigDict(populate_by_name=True)


class CatalogDocument(BaseModel):
    """Root of a catalog YAML document (RadioReference field names)."""
    types: list[TypeModel] = Field(default_factory=list)
    flavors: list[FlavorModel] = Field(default_factory=list)
    voices: list[VoiceModel] = Field(default_factory=list)
    tags: list[TagModel] = Field(default_factory=list)
    systems: list[SystemModel] = Field(default_factory=list)
    talkgroups: list[TalkgroupModel] = Field(default_factory=list)

    @field_validator("types", "flavors", "voices", "tags", "systems", "talkgroups", mode="before")
    @classmethod
    def none_as_empty(cls, v: object) -> object:
        return [] if v is None else v
