# sims/presets.py
"""Списки предустановок: факультеты, специальности и названия оценок.

Предустановки ограничивают значения полей только в момент записи. Очистка
списка не затрагивает уже сохранённых студентов.

Объекты не потокобезопасны: все операции рассчитаны на монопольный доступ.
"""
from typing import Iterator, Optional, Tuple

from .errors import AllocationFailedError, DuplicateEntryError, NotFoundError, ValidationFailedError
from .validators import is_blank


class PresetList:
    """Упорядоченный набор уникальных непустых строк одного вида."""

    def __init__(self, kind: str):
        self.kind = kind
        self._entries = []

    def add(self, name: str) -> None:
        """Добавляет значение, отклоняя пустые строки и повторы (точное совпадение)."""
        if is_blank(name):
            raise ValidationFailedError(f"Название ({self.kind}) не может быть пустым.")
        if name in self._entries:
            raise DuplicateEntryError(f"'{name}' уже есть в списке ({self.kind}).")
        try:
            self._entries.append(name)
        except MemoryError as e:
            raise AllocationFailedError(f"Не удалось расширить список ({self.kind}).") from e

    def clear_all(self) -> None:
        self._entries.clear()

    def contains(self, name: str) -> bool:
        # Пустой список никогда ничего не содержит
        if not self._entries:
            return False
        return name in self._entries

    def list(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def select(self, position: int) -> str:
        """Возвращает значение по видимому номеру (с 1)."""
        if not 1 <= position <= len(self._entries):
            raise NotFoundError(f"Нет позиции {position} в списке ({self.kind}).")
        return self._entries[position - 1]

    def label_for(self, index: int) -> Optional[str]:
        """Значение по индексу (с 0) или None, если список короче."""
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __repr__(self) -> str:
        return f"PresetList(kind='{self.kind}', entries={self._entries!r})"


class PresetRegistry:
    """Три независимых списка предустановок."""

    def __init__(self):
        self.departments = PresetList("факультет")
        self.majors = PresetList("специальность")
        self.score_names = PresetList("название оценки")
