"""
WarehouseLayout — Модель планировки складской зоны

Mutable Pydantic модель.

- grid: 3D сетка стеллажей/ячеек (может быть ragged на любом уровне)
- temperature_map: 2D карта температур
- заменяемы: zone_name, grid, temperature_map; остальное фиксировано
"""

from pydantic import BaseModel, Field


class WarehouseLayout(BaseModel):
    """Планировка складской зоны"""

    id: int = Field(..., frozen=True, description="Идентификатор зоны")
    zone_name: str = Field(..., description="Название зоны")
    grid: list[list[list[int]]] = Field(..., description="3D сетка стеллажей/ячеек")
    temperature_map: list[list[float]] = Field(..., description="2D карта температур")
    is_active: bool = Field(..., frozen=True, description="Зона активна")
    manager_name: str = Field(..., frozen=True, description="Ответственный менеджер")
    capacity: int = Field(..., frozen=True, description="Вместимость")

    model_config = {"strict": True, "validate_assignment": True, "extra": "forbid"}

    @classmethod
    def empty(cls) -> "WarehouseLayout":
        """Зона по умолчанию: id=0, capacity=0, is_active=False, пустые коллекции"""
        return cls(
            id=0,
            zone_name="",
            grid=[],
            temperature_map=[],
            is_active=False,
            manager_name="",
            capacity=0,
        )
