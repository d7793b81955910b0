"""
Product — Модель товара

Mutable Pydantic модель. id фиксирован; name, price, in_stock заменяемы.
Цена не проверяется (отрицательная цена допустима).
"""

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Товар каталога"""

    id: int = Field(..., frozen=True, description="Идентификатор товара")
    name: str = Field(..., description="Название товара")
    price: float = Field(..., description="Цена")
    in_stock: bool = Field(..., description="Наличие на складе")

    model_config = {"strict": True, "validate_assignment": True, "extra": "forbid"}

    @classmethod
    def empty(cls) -> "Product":
        """Товар по умолчанию: id=0, price=0.0, in_stock=False"""
        return cls(id=0, name="", price=0.0, in_stock=False)
