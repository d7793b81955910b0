"""
GameMap — Модель игровой карты

Mutable Pydantic модель.

- terrain: 2D сетка (может быть ragged), заменяема присваиванием
- object_placement: 2D расстановка объектов, пустая после создания, только чтение
- tags: только запись (set_tags)
- max_players: задаётся при создании, наружу не читается
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter


_STRICT = ConfigDict(strict=True)
_MAX_PLAYERS: TypeAdapter[int] = TypeAdapter(int, config=_STRICT)
_TAGS: TypeAdapter[list[str]] = TypeAdapter(list[str], config=_STRICT)


class GameMap(BaseModel):
    """Игровая карта"""

    map_id: int = Field(..., frozen=True, description="Идентификатор карты")
    name: str = Field(..., frozen=True, description="Название карты")
    terrain: list[list[int]] = Field(..., description="2D сетка рельефа")
    difficulty: int = Field(..., frozen=True, description="Сложность")
    is_ranked: bool = Field(..., frozen=True, description="Рейтинговая карта")

    _max_players: int = PrivateAttr(default=0)
    _object_placement: list[list[str]] = PrivateAttr(default_factory=list)
    _tags: list[str] = PrivateAttr(default_factory=list)

    model_config = {"strict": True, "validate_assignment": True, "extra": "forbid"}

    def __init__(self, *, max_players: int, **data: Any) -> None:
        super().__init__(**data)
        self._max_players = _MAX_PLAYERS.validate_python(max_players)

    @classmethod
    def empty(cls) -> "GameMap":
        """Карта по умолчанию: нули, пустые строки и коллекции, is_ranked=False"""
        return cls(map_id=0, name="", terrain=[], difficulty=0, max_players=0, is_ranked=False)

    @property
    def object_placement(self) -> list[list[str]]:
        return self._object_placement

    def set_tags(self, tags: list[str]) -> None:
        """Замена тегов (чтения тегов нет)"""
        self._tags = _TAGS.validate_python(tags)
