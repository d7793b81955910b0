"""
Order — Модель заказа

Mutable Pydantic модель. order_id фиксирован; total_amount и item_count заменяемы.
"""

from pydantic import BaseModel, Field


class Order(BaseModel):
    """Заказ"""

    order_id: str = Field(..., frozen=True, description="Идентификатор заказа")
    total_amount: float = Field(..., description="Сумма заказа")
    item_count: int = Field(..., description="Количество позиций")

    model_config = {"strict": True, "validate_assignment": True, "extra": "forbid"}

    @classmethod
    def empty(cls) -> "Order":
        return cls(order_id="", total_amount=0.0, item_count=0)
