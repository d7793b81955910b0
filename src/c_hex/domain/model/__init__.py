"""
Domain models — каталог записей (value objects).

Записи независимы: ни одна не ссылается на другую.

Общая поверхность:
- Record(...)     : конструктор со значениями (keyword-аргументы)
- Record.empty()  : конструктор по умолчанию (нули, пустые строки/коллекции)
- record.attr     : чтение
- record.attr = v : замена (только для заменяемых полей)
- record.model_copy(deep=True): независимый снапшот
"""

from c_hex.domain.model.category import Category
from c_hex.domain.model.complex_signal import ComplexSignal
from c_hex.domain.model.customer import Customer
from c_hex.domain.model.financial_portfolio import DEFAULT_CURRENCY, FinancialPortfolio
from c_hex.domain.model.game_map import GameMap
from c_hex.domain.model.invoice import Invoice
from c_hex.domain.model.neural_network_config import (
    DEFAULT_EPOCHS,
    DEFAULT_LEARNING_RATE,
    NeuralNetworkConfig,
)
from c_hex.domain.model.order import Order
from c_hex.domain.model.product import Product
from c_hex.domain.model.user import User
from c_hex.domain.model.warehouse_layout import WarehouseLayout

__all__ = [
    # Commerce
    "Category",
    "Product",
    "Order",
    "Invoice",
    "Customer",
    # Identity
    "User",
    # Array-bearing records
    "GameMap",
    "ComplexSignal",
    "FinancialPortfolio",
    "DEFAULT_CURRENCY",
    "NeuralNetworkConfig",
    "DEFAULT_EPOCHS",
    "DEFAULT_LEARNING_RATE",
    "WarehouseLayout",
]
