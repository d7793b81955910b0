"""
ComplexSignal — Модель записанного сигнала

Mutable Pydantic модель: сырая форма волны (1D), спектрограмма (2D, может быть
ragged), полосы частот, флаг валидности, устройство-источник, усиление.

Асимметрия поверхности:
- frequency_bands принимается конструктором, но не читается и не заменяется
- gain принимается конструктором и заменяется через set_gain(), но не читается
- spectrogram: единственное заменяемое присваиванием поле
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter


_STRICT = ConfigDict(strict=True)
_BANDS: TypeAdapter[list[float]] = TypeAdapter(list[float], config=_STRICT)
_GAIN: TypeAdapter[float] = TypeAdapter(float, config=_STRICT)


class ComplexSignal(BaseModel):
    """
    Сигнал с устройства.

    frequency_bands хранится как список float (значения single precision
    передаются как есть, без округления).
    """

    signal_id: str = Field(..., frozen=True, description="Идентификатор сигнала")
    timestamp: int = Field(..., frozen=True, description="Время записи")
    raw_waveform: list[float] = Field(..., frozen=True, description="Сырая форма волны (1D)")
    spectrogram: list[list[float]] = Field(..., description="Спектрограмма (2D)")
    is_valid: bool = Field(..., frozen=True, description="Сигнал валиден")
    source_device: str = Field(..., frozen=True, description="Устройство-источник")

    _frequency_bands: list[float] = PrivateAttr(default_factory=list)
    _gain: float = PrivateAttr(default=0.0)

    model_config = {"strict": True, "validate_assignment": True, "extra": "forbid"}

    def __init__(self, *, frequency_bands: list[float], gain: float, **data: Any) -> None:
        super().__init__(**data)
        self._frequency_bands = _BANDS.validate_python(frequency_bands)
        self._gain = _GAIN.validate_python(gain)

    @classmethod
    def empty(cls) -> "ComplexSignal":
        return cls(
            signal_id="",
            timestamp=0,
            raw_waveform=[],
            spectrogram=[],
            frequency_bands=[],
            is_valid=False,
            source_device="",
            gain=0.0,
        )

    def set_gain(self, gain: float) -> None:
        self._gain = _GAIN.validate_python(gain)
