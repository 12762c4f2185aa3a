# sims/models.py
"""Модуль, определяющий основные модели данных: ScoreList и Student."""
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import AllocationFailedError, OutOfRangeError, ValidationFailedError
from .validators import (
    is_valid_class_label, is_valid_identifier, is_valid_name, is_valid_score, normalize_gender,
)


class ScoreList:
    """Оценки одного студента в порядке ввода с накопленной суммой."""

    def __init__(self):
        self._values: List[float] = []
        self._total = 0.0

    def append(self, value: float) -> None:
        if not is_valid_score(value):
            raise OutOfRangeError(f"Оценка {value} недопустима. Разрешен диапазон 0-100.")
        try:
            self._values.append(float(value))
        except MemoryError as e:
            raise AllocationFailedError("Не удалось расширить список оценок.") from e
        self._total += float(value)

    def replace_all(self, values: Iterable[float]) -> None:
        """Заменяет все оценки. Если хоть одна плохая - список не меняется."""
        # Собираем новый список отдельно и подменяем только в конце
        replacement = ScoreList()
        for value in values:
            replacement.append(value)

        self._values = replacement._values
        self._total = replacement._total

    def finalize(self) -> bool:
        """Пустой список получает одну оценку 0.0. Возвращает True, если так и вышло."""
        if self._values:
            return False
        self._values.append(0.0)
        return True

    def total(self) -> float:
        return self._total

    def values(self) -> Tuple[float, ...]:
        return tuple(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values())

    def __repr__(self) -> str:
        return f"ScoreList(values={self._values!r}, total={self._total:.2f})"


@dataclass(frozen=True)
class StudentSnapshot:
    """Неизменяемый снимок записи студента для отображения."""
    name: str
    gender: str
    student_id: str
    class_name: str
    department: str
    major: str
    scores: Tuple[float, ...]
    total: float


@dataclass
class StudentCandidate:
    """Сырые данные для добавления нового студента."""
    name: str
    gender: str
    student_id: str
    class_name: str
    department: str
    major: str
    scores: List[float] = field(default_factory=list)


class Student:
    """Представляет студента: анкетные поля и собственный список оценок.

    Факультет и специальность сверяются с предустановками в Registry,
    здесь они только сохраняются.
    """

    def __init__(self, name: str, gender: str, student_id: str, class_name: str,
                 department: str, major: str, scores: Optional[ScoreList] = None):
        if not is_valid_name(name):
            raise ValidationFailedError("Имя должно содержать от 1 до 20 символов.")
        if not is_valid_identifier(student_id):
            raise ValidationFailedError("Номер студента: 4-20 латинских букв и цифр.")
        if not is_valid_class_label(class_name):
            raise ValidationFailedError("Класс не может быть пустым и длиннее 20 символов.")

        self.name = name
        self.gender = normalize_gender(gender)
        self.student_id = student_id
        self.class_name = class_name
        self.department = department
        self.major = major
        self.scores = scores if scores is not None else ScoreList()

    @property
    def total(self) -> float:
        return self.scores.total()

    def snapshot(self) -> StudentSnapshot:
        return StudentSnapshot(
            name=self.name,
            gender=self.gender,
            student_id=self.student_id,
            class_name=self.class_name,
            department=self.department,
            major=self.major,
            scores=self.scores.values(),
            total=self.total,
        )

    def labeled_scores(self, score_names) -> List[Tuple[Optional[str], float]]:
        """Пары (название оценки, оценка); без названия для позиции - None."""
        return [(score_names.label_for(i), value) for i, value in enumerate(self.scores)]

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(id='{self.student_id}', name='{self.name}', total={self.total:.2f})"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        scores_str = ", ".join(f"{v:.2f}" for v in self.scores)
        return (f"Номер: {self.student_id:<8} | Имя: {self.name:<20} | Класс: {self.class_name:<10} "
                f"| Сумма: {self.total:<7.2f} | Оценки: [{scores_str}]")
