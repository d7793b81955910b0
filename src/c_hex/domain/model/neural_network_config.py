"""
NeuralNetworkConfig — Модель конфигурации нейросети

Mutable Pydantic модель. Только хранение параметров: обучения и инференса
здесь нет.

Создание через NeuralNetworkConfig(...): epochs=100, is_training=False,
weights/biases пустые. NeuralNetworkConfig.empty(): learning_rate=0.01, epochs=0.

layer_sizes и epochs фиксируются при создании и наружу не читаются.
"""

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter


DEFAULT_EPOCHS: Final[int] = 100
DEFAULT_LEARNING_RATE: Final[float] = 0.01


_STRICT = ConfigDict(strict=True)
_LAYER_SIZES: TypeAdapter[list[int]] = TypeAdapter(list[int], config=_STRICT)
_WEIGHTS: TypeAdapter[list[list[list[float]]]] = TypeAdapter(list[list[list[float]]], config=_STRICT)
_BIASES: TypeAdapter[list[list[float]]] = TypeAdapter(list[list[float]], config=_STRICT)
_FLAG: TypeAdapter[bool] = TypeAdapter(bool, config=_STRICT)


class NeuralNetworkConfig(BaseModel):
    """
    Конфигурация нейросети.

    Поверхность:
    - читаются: config_id, weights, biases, learning_rate, optimizer, is_training
    - заменяются: weights (3D), biases (2D), is_training
    """

    config_id: int = Field(..., frozen=True, description="Идентификатор конфигурации")
    learning_rate: float = Field(..., frozen=True, description="Learning rate")
    optimizer: str = Field(..., frozen=True, description="Оптимизатор (например, 'adam')")

    _layer_sizes: list[int] = PrivateAttr(default_factory=list)
    _weights: list[list[list[float]]] = PrivateAttr(default_factory=list)
    _biases: list[list[float]] = PrivateAttr(default_factory=list)
    _epochs: int = PrivateAttr(default=DEFAULT_EPOCHS)
    _is_training: bool = PrivateAttr(default=False)

    model_config = {"strict": True, "validate_assignment": True, "extra": "forbid"}

    def __init__(self, *, layer_sizes: list[int], **data: Any) -> None:
        super().__init__(**data)
        self._layer_sizes = _LAYER_SIZES.validate_python(layer_sizes)

    @classmethod
    def empty(cls) -> "NeuralNetworkConfig":
        """Конфигурация по умолчанию: config_id=0, learning_rate=0.01, epochs=0"""
        config = cls(
            config_id=0,
            layer_sizes=[],
            learning_rate=DEFAULT_LEARNING_RATE,
            optimizer="",
        )
        config._epochs = 0
        return config

    @property
    def weights(self) -> list[list[list[float]]]:
        return self._weights

    @weights.setter
    def weights(self, weights: list[list[list[float]]]) -> None:
        self._weights = _WEIGHTS.validate_python(weights)

    @property
    def biases(self) -> list[list[float]]:
        return self._biases

    @biases.setter
    def biases(self, biases: list[list[float]]) -> None:
        self._biases = _BIASES.validate_python(biases)

    @property
    def is_training(self) -> bool:
        return self._is_training

    @is_training.setter
    def is_training(self, training: bool) -> None:
        self._is_training = _FLAG.validate_python(training)
