"""
c_hex — каталог доменных моделей (value objects).

Пакет не зависит от внешних систем (БД, транспорт, сериализация).
Доменные модели: c_hex.domain.model, порты: c_hex.domain.ports,
адаптеры: c_hex.infrastructure.
"""
