"""Pydantic models describing cloud-library payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class LibraryModel(BaseModel):
    """Fields shared by every catalogued object.

    Unknown keys are kept so newer service versions do not break decoding.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: str = ""
    deleted: bool = False
    created_by: str | None = None
    created_at: datetime | None = None
    updated_by: str | None = None
    updated_at: datetime | None = None
    deleted_by: str | None = None
    deleted_at: datetime | None = None
    owner: str | None = None


class Entity(LibraryModel):
    name: str = ""
    description: str = ""
    collections: list[str] = Field(default_factory=list)
    size: int = 0
    quota: int = 0
    default_private: bool = False

    @field_validator("collections", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return [] if value is None else value


class Collection(LibraryModel):
    name: str = ""
    description: str = ""
    entity: str = ""
    containers: list[str] = Field(default_factory=list)
    size: int = 0
    private: bool = False
    entity_name: str = ""

    @field_validator("containers", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return [] if value is None else value


class Container(LibraryModel):
    name: str = ""
    description: str = ""
    full_description: str = ""
    collection: str = ""
    images: list[str] = Field(default_factory=list)
    image_tags: dict[str, str] = Field(default_factory=dict)
    arch_tags: dict[str, dict[str, str]] = Field(default_factory=dict)
    size: int = 0
    download_count: int = 0
    private: bool = False
    entity_name: str = ""
    collection_name: str = ""

    @field_validator("images", "image_tags", "arch_tags", mode="before")
    @classmethod
    def _null_to_empty(cls, value, info):
        if value is None:
            return [] if info.field_name == "images" else {}
        return value


class Image(LibraryModel):
    hash: str = ""
    description: str = ""
    container: str = ""
    blob: str = ""
    size: int = 0
    uploaded: bool = False
    signed: bool | None = None
    architecture: str | None = None
    fingerprints: list[str] = Field(default_factory=list)
    entity_name: str = ""
    collection_name: str = ""
    container_name: str = ""

    @field_validator("fingerprints", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return [] if value is None else value


class SearchResults(BaseModel):
    """Matches grouped by kind; any group may be empty."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    entities: list[Entity] = Field(default_factory=list, alias="entity")
    collections: list[Collection] = Field(default_factory=list, alias="collection")
    containers: list[Container] = Field(default_factory=list, alias="container")
    images: list[Image] = Field(default_factory=list, alias="image")

    @field_validator("entities", "collections", "containers", "images", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return [] if value is None else value


class SearchResponse(BaseModel):
    data: SearchResults


class ErrorDetail(BaseModel):
    code: int | None = None
    message: str = ""


class ErrorResponse(BaseModel):
    error: ErrorDetail


__all__ = [
    "Collection",
    "Container",
    "Entity",
    "ErrorDetail",
    "ErrorResponse",
    "Image",
    "LibraryModel",
    "SearchResponse",
    "SearchResults",
]
