"""
Customer — Модель клиента

Mutable Pydantic модель. Идентификатор и имя фиксированы,
email и age заменяемы. Возраст не проверяется (любой int).
"""

from pydantic import BaseModel, Field


class Customer(BaseModel):
    """
    Клиент.

    Заменяемые поля: email, age.
    """

    customer_id: int = Field(..., frozen=True, description="Идентификатор клиента")
    first_name: str = Field(..., frozen=True, description="Имя")
    last_name: str = Field(..., frozen=True, description="Фамилия")
    email: str = Field(..., description="Email")
    age: int = Field(..., description="Возраст")

    model_config = {"strict": True, "validate_assignment": True, "extra": "forbid"}

    @classmethod
    def empty(cls) -> "Customer":
        """Клиент по умолчанию: customer_id=0, age=0, пустые строки"""
        return cls(customer_id=0, first_name="", last_name="", email="", age=0)
