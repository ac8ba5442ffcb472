"""
BoundedList — Упорядоченная коллекция с ограниченной ёмкостью

Хранит до `capacity` элементов произвольного типа в порядке вставки.
Переполнение — штатный исход (try_append возвращает False), а не ошибка.

ИНВАРИАНТ: len(items) <= capacity в любой момент времени.

Экземпляр не потокобезопасен: конкурентные мутации требуют внешней
синхронизации.
"""

import logging
from typing import Generic, Iterable, Iterator, List, Tuple, TypeVar

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

# Разделитель по умолчанию для render()
DEFAULT_SEPARATOR = ", "


class BoundedList(Generic[T]):
    """
    Коллекция с фиксированной максимальной длиной.

    Удаление элементов не предусмотрено: коллекция только растёт до capacity.
    """

    __slots__ = ("_capacity", "_items")

    def __init__(self, capacity: int):
        """
        Args:
            capacity: Максимальное число элементов (>= 0)

        Raises:
            ValueError: Если capacity отрицательна или не является int
        """
        # bool является подклассом int
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"Capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise ValueError(f"Capacity cannot be negative: {capacity}")

        self._capacity = capacity
        self._items: List[T] = []

    # =========================================================================
    # МУТАЦИЯ
    # =========================================================================

    def try_append(self, item: T) -> bool:
        """
        Добавление элемента в конец, если есть место.

        Returns:
            True если элемент добавлен, False если коллекция заполнена
            (коллекция при этом не меняется)
        """
        if len(self._items) < self._capacity:
            self._items.append(item)
            return True

        LOGGER.debug(
            "Append rejected: collection full (%d/%d)", len(self._items), self._capacity
        )
        return False

    def try_extend(self, items: Iterable[T]) -> int:
        """
        Последовательное добавление элементов до заполнения.

        Останавливается на первом отклонённом элементе.

        Returns:
            Количество добавленных элементов
        """
        accepted = 0
        for item in items:
            if not self.try_append(item):
                break
            accepted += 1
        return accepted

    # =========================================================================
    # ЧТЕНИЕ
    # =========================================================================

    @property
    def capacity(self) -> int:
        """Максимальное число элементов."""
        return self._capacity

    @property
    def items(self) -> Tuple[T, ...]:
        """Снимок элементов в порядке вставки."""
        return tuple(self._items)

    @property
    def remaining(self) -> int:
        return self._capacity - len(self._items)

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def render(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """
        Текстовое представление содержимого.

        Каждый элемент сопровождается разделителем, включая последний:
        [a, b, c] -> "a, b, c, ". Пустая коллекция -> "".
        None отображается пустой строкой.
        """
        return "".join(_display(item) + separator for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return f"BoundedList(capacity={self._capacity}, items={self._items!r})"


def _display(item: object) -> str:
    return "" if item is None else str(item)
