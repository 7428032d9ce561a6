"""
卡片相关 Schema
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from cardbox.models import CardCategory


class CardCreate(BaseModel):
    """创建卡片请求（category 必填）"""
    title: str = ""
    category: CardCategory
    content: str = ""
    tags: List[str] = Field(default_factory=list)


class CardUpdate(BaseModel):
    """部分更新：只有显式给出的字段会被修改"""
    title: Optional[str] = None
    category: Optional[CardCategory] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None

    @model_validator(mode="after")
    def reject_explicit_null(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} must not be null")
        return self

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        if "category" in data:
            data["category"] = data["category"].value
        return data


class CardOut(BaseModel):
    """对外卡片（不含 owner id）"""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    category: CardCategory
    content: str
    tags: List[str]
    created_at: int
    updated_at: int


class DeckStats(BaseModel):
    """卡组统计"""
    total: int = 0
    stories: int = 0
    prompts: int = 0
    notes: int = 0
    texts: int = 0


class MessageResponse(BaseModel):
    message: str
