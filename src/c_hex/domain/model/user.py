"""
User — Модель пользователя

Mutable Pydantic модель с доменными операциями activate/deactivate.

Флаг active меняется только через activate()/deactivate() (или выбором
конструктора): создание через User(...) даёт active=True, User.empty() даёт False.
Каждая доменная операция пишет одну строку в TextSink, переданный
при создании экземпляра. Создание пользователя строк не пишет.
"""

from typing import Any, Iterator, Optional

from pydantic import BaseModel, Field, PrivateAttr

from c_hex.domain.ports.text_sink import NullTextSink, TextSink


class User(BaseModel):
    """
    Пользователь.

    Args (keyword):
        id: идентификатор (неизменяем)
        username: имя пользователя
        email: email
        sink: приёмник строк activate/deactivate (по умолчанию NullTextSink)

    Sink не входит в значение записи: __eq__ его не учитывает.
    """

    id: int = Field(..., frozen=True, description="Идентификатор пользователя")
    username: str = Field(..., description="Имя пользователя")
    email: str = Field(..., description="Email")

    _active: bool = PrivateAttr(default=True)
    _sink: TextSink = PrivateAttr(default_factory=NullTextSink)

    model_config = {"strict": True, "validate_assignment": True, "extra": "forbid"}

    def __init__(self, *, sink: Optional[TextSink] = None, **data: Any) -> None:
        super().__init__(**data)
        if sink is not None:
            self._sink = sink

    @classmethod
    def empty(cls, sink: Optional[TextSink] = None) -> "User":
        """Пользователь по умолчанию: id=0, пустые строки, active=False"""
        user = cls(id=0, username="", email="", sink=sink)
        user._active = False
        return user

    @property
    def active(self) -> bool:
        return self._active

    # =========================================================================
    # DOMAIN LOGIC
    # =========================================================================

    def activate(self) -> None:
        """Активация (идемпотентна по флагу, строка пишется при каждом вызове)"""
        self._active = True
        self._sink(f"User {self.username} activated.")

    def deactivate(self) -> None:
        """Деактивация (идемпотентна по флагу, строка пишется при каждом вызове)"""
        self._active = False
        self._sink(f"User {self.username} deactivated.")

    # =========================================================================
    # VALUE SEMANTICS / PROJECTIONS
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return (self.id, self.username, self.email, self._active) == (
            other.id,
            other.username,
            other.email,
            other._active,
        )

    def __deepcopy__(self, memo: Optional[dict[int, Any]] = None) -> "User":
        """Снапшот копирует значение записи, sink передаётся по ссылке"""
        memo = {} if memo is None else memo
        memo[id(self._sink)] = self._sink
        return super().__deepcopy__(memo)

    def __str__(self) -> str:
        """Стабильная проекция: User{id=7, username='ada', email='ada@x', active=true}"""
        return (
            f"User{{id={self.id}, username='{self.username}', "
            f"email='{self.email}', active={'true' if self._active else 'false'}}}"
        )

    def __repr_args__(self) -> Iterator[tuple[Optional[str], Any]]:
        yield from super().__repr_args__()
        yield "active", self._active
