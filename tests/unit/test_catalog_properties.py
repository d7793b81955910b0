"""
Сквозные свойства каталога моделей

Для каждой записи:
1. Два создания с одинаковыми аргументами дают равные экземпляры
2. empty(): числа = 0, флаги по умолчанию, коллекции пустые
3. Повторная замена тем же значением эквивалентна однократной
4. Записи mutable → unhashable; снапшот через model_copy(deep=True)
"""

import copy
from typing import Any, Callable

import pytest
from pydantic import BaseModel

from c_hex.domain.model import (
    Category,
    ComplexSignal,
    Customer,
    FinancialPortfolio,
    GameMap,
    Invoice,
    NeuralNetworkConfig,
    Order,
    Product,
    User,
    WarehouseLayout,
)


# =============================================================================
# FIXTURES
# =============================================================================

BUILDERS: dict[str, Callable[[], BaseModel]] = {
    "category": lambda: Category(id=1, title="Books"),
    "product": lambda: Product(id=42, name="widget", price=9.5, in_stock=True),
    "order": lambda: Order(order_id="ORD-1", total_amount=10.0, item_count=1),
    "invoice": lambda: Invoice(invoice_number="INV-1", issue_date="2024-01-01", is_paid=False),
    "customer": lambda: Customer(
        customer_id=1, first_name="Ada", last_name="Lovelace", email="ada@x", age=36
    ),
    "user": lambda: User(id=7, username="ada", email="ada@x"),
    "game_map": lambda: GameMap(
        map_id=1, name="arena", terrain=[[1, 2], [3]], difficulty=2, max_players=8, is_ranked=False
    ),
    "complex_signal": lambda: ComplexSignal(
        signal_id="S1",
        timestamp=1,
        raw_waveform=[0.1],
        spectrogram=[[0.2, 0.3]],
        frequency_bands=[50.0],
        is_valid=True,
        source_device="mic",
        gain=1.0,
    ),
    "financial_portfolio": lambda: FinancialPortfolio(
        portfolio_id="P1", owner_name="Alice", total_value=1000.0
    ),
    "neural_network_config": lambda: NeuralNetworkConfig(
        config_id=1, layer_sizes=[3, 4, 1], learning_rate=0.05, optimizer="adam"
    ),
    "warehouse_layout": lambda: WarehouseLayout(
        id=1,
        zone_name="A",
        grid=[[[1], [2, 3]]],
        temperature_map=[[4.0]],
        is_active=True,
        manager_name="Lin",
        capacity=100,
    ),
}

# (класс, ожидаемые значения читаемых атрибутов после empty())
EMPTY_EXPECTATIONS: list[tuple[type, dict[str, Any]]] = [
    (Category, {"id": 0, "title": ""}),
    (Product, {"id": 0, "name": "", "price": 0.0, "in_stock": False}),
    (Order, {"order_id": "", "total_amount": 0.0, "item_count": 0}),
    (Invoice, {"invoice_number": "", "issue_date": "", "is_paid": False}),
    (
        Customer,
        {"customer_id": 0, "first_name": "", "last_name": "", "email": "", "age": 0},
    ),
    (User, {"id": 0, "username": "", "email": "", "active": False}),
    (
        GameMap,
        {
            "map_id": 0,
            "name": "",
            "terrain": [],
            "object_placement": [],
            "difficulty": 0,
            "is_ranked": False,
        },
    ),
    (
        ComplexSignal,
        {
            "signal_id": "",
            "timestamp": 0,
            "raw_waveform": [],
            "spectrogram": [],
            "is_valid": False,
            "source_device": "",
        },
    ),
    (
        FinancialPortfolio,
        {
            "portfolio_id": "",
            "owner_name": "",
            "historical_returns": [],
            "risk_matrix": [],
            "total_value": 0.0,
            "currency": "",
        },
    ),
    (
        NeuralNetworkConfig,
        {
            "config_id": 0,
            "weights": [],
            "biases": [],
            "learning_rate": 0.01,
            "optimizer": "",
            "is_training": False,
        },
    ),
    (
        WarehouseLayout,
        {
            "id": 0,
            "zone_name": "",
            "grid": [],
            "temperature_map": [],
            "is_active": False,
            "manager_name": "",
            "capacity": 0,
        },
    ),
]

# (builder, атрибут или set_-метод, новое значение, ключ в состоянии записи)
MUTATORS: list[tuple[str, str, Any, str]] = [
    ("category", "title", "Comics", "title"),
    ("product", "name", "gadget", "name"),
    ("product", "price", 10.0, "price"),
    ("product", "in_stock", False, "in_stock"),
    ("order", "total_amount", 12.5, "total_amount"),
    ("order", "item_count", 2, "item_count"),
    ("invoice", "is_paid", True, "is_paid"),
    ("customer", "email", "ada@lovelace.org", "email"),
    ("customer", "age", 37, "age"),
    ("user", "username", "countess", "username"),
    ("user", "email", "countess@x", "email"),
    ("game_map", "terrain", [[0], [0, 0]], "terrain"),
    ("game_map", "set_tags", ["pvp", "night"], "_tags"),
    ("complex_signal", "spectrogram", [[1.0], []], "spectrogram"),
    ("complex_signal", "set_gain", 2.0, "_gain"),
    ("financial_portfolio", "historical_returns", [[0.1, 0.2], [0.3]], "_historical_returns"),
    ("financial_portfolio", "risk_matrix", [[1.0]], "_risk_matrix"),
    ("financial_portfolio", "total_value", 1250.0, "total_value"),
    ("neural_network_config", "weights", [[[0.1]], [[0.2, 0.3]]], "_weights"),
    ("neural_network_config", "biases", [[0.5], []], "_biases"),
    ("neural_network_config", "is_training", True, "_is_training"),
    ("warehouse_layout", "zone_name", "B", "zone_name"),
    ("warehouse_layout", "grid", [[[9]], []], "grid"),
    ("warehouse_layout", "temperature_map", [[-1.0, -2.0]], "temperature_map"),
]

MUTATOR_IDS = [f"{name}.{attr}" for name, attr, _, _ in MUTATORS]


def _mutate(record: BaseModel, attr: str, value: Any) -> None:
    if attr.startswith("set_"):
        getattr(record, attr)(value)
    else:
        setattr(record, attr, value)


def _state(record: BaseModel) -> dict[str, Any]:
    """Полное состояние записи: поля конструктора и приватные атрибуты"""
    return copy.deepcopy({**record.model_dump(), **(record.__pydantic_private__ or {})})


# =============================================================================
# PROPERTY TESTS
# =============================================================================


@pytest.mark.parametrize("name", sorted(BUILDERS))
def test_same_inputs_give_equal_records(name: str) -> None:
    build = BUILDERS[name]
    assert build() == build()


@pytest.mark.parametrize("name", sorted(BUILDERS))
def test_records_are_unhashable(name: str) -> None:
    with pytest.raises(TypeError):
        hash(BUILDERS[name]())


@pytest.mark.parametrize("name", sorted(BUILDERS))
def test_deep_copy_equals_original(name: str) -> None:
    record = BUILDERS[name]()
    assert record.model_copy(deep=True) == record


@pytest.mark.parametrize(
    "record_cls, expected", EMPTY_EXPECTATIONS, ids=[cls.__name__ for cls, _ in EMPTY_EXPECTATIONS]
)
def test_empty_defaults(record_cls: type, expected: dict[str, Any]) -> None:
    record = record_cls.empty()
    for attr, value in expected.items():
        assert getattr(record, attr) == value, attr


@pytest.mark.parametrize(
    "record_cls", [cls for cls, _ in EMPTY_EXPECTATIONS], ids=lambda cls: cls.__name__
)
def test_empty_records_are_equal(record_cls: type) -> None:
    assert record_cls.empty() == record_cls.empty()


@pytest.mark.parametrize("name, attr, value, key", MUTATORS, ids=MUTATOR_IDS)
def test_mutator_idempotent(name: str, attr: str, value: Any, key: str) -> None:
    once = BUILDERS[name]()
    twice = BUILDERS[name]()

    _mutate(once, attr, value)
    _mutate(twice, attr, value)
    _mutate(twice, attr, value)

    assert _state(once)[key] == value
    assert once == twice
    assert _state(once) == _state(twice)


@pytest.mark.parametrize("name, attr, value, key", MUTATORS, ids=MUTATOR_IDS)
def test_mutator_touches_only_its_field(name: str, attr: str, value: Any, key: str) -> None:
    """Замена меняет только своё поле, включая приватные атрибуты"""
    record = BUILDERS[name]()
    before = _state(record)

    _mutate(record, attr, value)

    after = _state(record)
    assert before.keys() == after.keys()
    changed = {k for k in before if before[k] != after[k]}
    assert changed == {key}
