"""
Invoice — Модель счёта

Mutable Pydantic модель. Номер и дата выставления фиксированы,
меняется только флаг оплаты. issue_date хранится как есть (строка, без парсинга).
"""

from pydantic import BaseModel, Field


class Invoice(BaseModel):
    """Счёт"""

    invoice_number: str = Field(..., frozen=True, description="Номер счёта")
    issue_date: str = Field(..., frozen=True, description="Дата выставления (как передана)")
    is_paid: bool = Field(..., description="Счёт оплачен")

    model_config = {"strict": True, "validate_assignment": True, "extra": "forbid"}

    @classmethod
    def empty(cls) -> "Invoice":
        """Счёт по умолчанию: пустые номер и дата, is_paid=False"""
        return cls(invoice_number="", issue_date="", is_paid=False)
