from typing import List

from pydantic import BaseModel, ConfigDict, Field


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    url: str
    order: int
    parent: int = 0  # 0 for top-level entries
    children: List["MenuItem"] = Field(default_factory=list)
