"""
TextSink — Порт построчного текстового вывода

Коллаборатор, в который доменные операции User (activate/deactivate) пишут
одну человекочитаемую строку. Подходит любой callable вида (line: str) -> None:
list.append, logging.Logger.info, LoggingTextSink и т.д.

Контракт: принимает одну строку, не пробрасывает ошибки вызывающему,
живёт не меньше, чем User, который его держит.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Построчный приёмник текста"""

    def __call__(self, line: str) -> None:
        ...


class NullTextSink:
    """
    Приёмник по умолчанию: строки отбрасываются.

    Используется, когда User создан без явного sink.
    """

    def __call__(self, line: str) -> None:
        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NullTextSink)

    def __hash__(self) -> int:
        return hash(NullTextSink)

    def __repr__(self) -> str:
        return "NullTextSink()"
