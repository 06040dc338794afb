from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer

from ..core.utils import format_date


class Quote(BaseModel):
    id: str = ""
    value: str = ""
    source_url: Optional[str] = None
    date: Optional[datetime] = None
    tags: List[str] = Field(default_factory=list)

    def add_tag(self, tag: str) -> None:
        self.tags.append(tag)

    def add_tags(self, tags: List[str]) -> None:
        self.tags.extend(tags)

    @field_serializer("date")
    def _serialize_date(self, date: Optional[datetime]) -> Optional[str]:
        return format_date(date)


class TagsResponse(BaseModel):
    embedded: List[str] = Field(alias="_embedded")


class SearchResponse(BaseModel):
    total: int = Field(default=0, ge=0)


class ErrorResponse(BaseModel):
    status: int
    message: str
