"""
FinancialPortfolio — Модель инвестиционного портфеля

Mutable Pydantic модель. Расчётов над портфелем нет (оценка, риск и т.п.
вне каталога), только хранение.

Создание через FinancialPortfolio(...): currency="USD", is_managed=True,
коллекции пустые. FinancialPortfolio.empty(): is_managed=False, currency="".

Поверхность:
- читаются: portfolio_id, owner_name, historical_returns, risk_matrix,
  total_value, currency
- заменяются: historical_returns, risk_matrix, total_value
- asset_allocation, last_updated, is_managed наружу не выставлены
"""

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter


DEFAULT_CURRENCY: Final[str] = "USD"


_MATRIX: TypeAdapter[list[list[float]]] = TypeAdapter(list[list[float]], config=ConfigDict(strict=True))


class FinancialPortfolio(BaseModel):
    """Портфель (идентификатор, владелец, стоимость, матрицы доходностей и риска)"""

    portfolio_id: str = Field(..., frozen=True, description="Идентификатор портфеля")
    owner_name: str = Field(..., frozen=True, description="Владелец")
    total_value: float = Field(..., description="Полная стоимость портфеля")

    _asset_allocation: list[float] = PrivateAttr(default_factory=list)
    _historical_returns: list[list[float]] = PrivateAttr(default_factory=list)
    _risk_matrix: list[list[float]] = PrivateAttr(default_factory=list)
    _last_updated: str = PrivateAttr(default="")
    _is_managed: bool = PrivateAttr(default=True)
    _currency: str = PrivateAttr(default=DEFAULT_CURRENCY)

    model_config = {"strict": True, "validate_assignment": True, "extra": "forbid"}

    @classmethod
    def empty(cls) -> "FinancialPortfolio":
        """Портфель по умолчанию: total_value=0.0, is_managed=False, без валюты"""
        portfolio = cls(portfolio_id="", owner_name="", total_value=0.0)
        portfolio._is_managed = False
        portfolio._currency = ""
        return portfolio

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def historical_returns(self) -> list[list[float]]:
        """2D доходности (ragged допустим)"""
        return self._historical_returns

    @historical_returns.setter
    def historical_returns(self, returns: list[list[float]]) -> None:
        self._historical_returns = _MATRIX.validate_python(returns)

    @property
    def risk_matrix(self) -> list[list[float]]:
        """2D матрица риска (single precision значения хранятся как float)"""
        return self._risk_matrix

    @risk_matrix.setter
    def risk_matrix(self, risk: list[list[float]]) -> None:
        self._risk_matrix = _MATRIX.validate_python(risk)
