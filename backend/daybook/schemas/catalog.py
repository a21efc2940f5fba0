"""Catalog Schemas — moods, categories and tags."""

from pydantic import BaseModel, ConfigDict, Field

from daybook.core.domain_types import MoodCategory


class MoodResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: MoodCategory
    color: str
    icon: str


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    color: str


class TagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    is_custom: bool


class TagCreate(BaseModel):
    name: str = Field(max_length=100)
