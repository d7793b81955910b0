"""
Category — Модель категории

Mutable Pydantic модель: id фиксируется при создании, title можно заменить.
"""

from pydantic import BaseModel, Field


class Category(BaseModel):
    """Категория каталога (id, title)"""

    id: int = Field(..., frozen=True, description="Идентификатор категории")
    title: str = Field(..., description="Название категории")

    model_config = {"strict": True, "validate_assignment": True, "extra": "forbid"}

    @classmethod
    def empty(cls) -> "Category":
        """Категория по умолчанию: id=0, пустой title"""
        return cls(id=0, title="")
