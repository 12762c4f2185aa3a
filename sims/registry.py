# sims/registry.py
"""Реестр студентов: добавление, поиск, изменение и удаление записей.

Реестр хранит записи в памяти в порядке добавления, без пропусков, и
имеет фиксированную максимальную вместимость. Объекты не потокобезопасны.
"""
from typing import List, Optional

from .errors import (
    AllocationFailedError, CapacityExceededError, DuplicateIdentifierError,
    NotFoundError, PresetsMissingError, ValidationFailedError,
)
from .models import ScoreList, Student, StudentCandidate, StudentSnapshot
from .presets import PresetRegistry
from .validators import (
    is_blank, is_valid_class_label, is_valid_name, normalize_gender,
)

MODIFIABLE_FIELDS = ("name", "gender", "class_name", "department", "major", "scores")


class Registry:
    """Ограниченная по вместимости коллекция записей студентов."""

    def __init__(self, capacity: int, presets: Optional[PresetRegistry] = None):
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("Вместимость реестра должна быть положительным целым числом.")
        self.capacity = capacity
        self.presets = presets if presets is not None else PresetRegistry()
        self._students: List[Student] = []

    def __len__(self) -> int:
        return len(self._students)

    def is_full(self) -> bool:
        return len(self._students) >= self.capacity

    def has_required_presets(self) -> bool:
        return len(self.presets.departments) > 0 and len(self.presets.majors) > 0

    def student_at(self, index: int) -> Student:
        if not 0 <= index < len(self._students):
            raise NotFoundError(f"Нет студента с позицией {index}.")
        return self._students[index]

    def _check_department(self, department: str) -> None:
        if not self.presets.departments.contains(department):
            raise ValidationFailedError(f"Факультет '{department}' отсутствует в предустановках.")

    def _check_major(self, major: str) -> None:
        if not self.presets.majors.contains(major):
            raise ValidationFailedError(f"Специальность '{major}' отсутствует в предустановках.")

    def add_student(self, candidate: StudentCandidate) -> StudentSnapshot:
        """Добавляет нового студента. Запись появляется только если прошли все проверки."""
        if not self.has_required_presets():
            raise PresetsMissingError("Сначала задайте предустановки факультетов и специальностей.")
        if self.is_full():
            raise CapacityExceededError(f"Реестр заполнен (максимум {self.capacity} студентов).")

        # Повтор номера отклоняется раньше остальных полей
        if any(s.student_id == candidate.student_id for s in self._students):
            raise DuplicateIdentifierError(f"Студент с номером {candidate.student_id} уже существует.")
        self._check_department(candidate.department)
        self._check_major(candidate.major)

        scores = ScoreList()
        scores.replace_all(candidate.scores)
        scores.finalize()

        # Здесь вызовется __init__ класса Student с проверкой имени, пола, номера и класса
        student = Student(
            name=candidate.name,
            gender=candidate.gender,
            student_id=candidate.student_id,
            class_name=candidate.class_name,
            department=candidate.department,
            major=candidate.major,
            scores=scores,
        )
        try:
            self._students.append(student)
        except MemoryError as e:
            raise AllocationFailedError("Не удалось добавить студента в реестр.") from e
        return student.snapshot()

    def index_of_id(self, student_id: str) -> int:
        """Позиция студента по точному совпадению номера."""
        if not is_blank(student_id):
            for i, s in enumerate(self._students):
                if s.student_id == student_id:
                    return i
        raise NotFoundError(f"Студент с номером {student_id} не найден.")

    def index_of_name(self, name: str) -> int:
        """Сначала точное совпадение имени, затем первое имя, содержащее подстроку."""
        if not is_blank(name):
            for i, s in enumerate(self._students):
                if s.name == name:
                    return i
            for i, s in enumerate(self._students):
                if name in s.name:
                    return i
        raise NotFoundError(f"Студент с именем '{name}' не найден.")

    def find_by_id(self, student_id: str) -> StudentSnapshot:
        return self._students[self.index_of_id(student_id)].snapshot()

    def find_by_name(self, name: str) -> StudentSnapshot:
        return self._students[self.index_of_name(name)].snapshot()

    def modify(self, index: int, field: str, new_value) -> StudentSnapshot:
        """Изменяет одно поле записи после повторной проверки значения."""
        student = self.student_at(index)

        if field == "name":
            if not is_valid_name(new_value):
                raise ValidationFailedError("Имя должно содержать от 1 до 20 символов.")
            student.name = new_value
        elif field == "gender":
            student.gender = normalize_gender(new_value)
        elif field == "class_name":
            if not is_valid_class_label(new_value):
                raise ValidationFailedError("Класс не может быть пустым и длиннее 20 символов.")
            student.class_name = new_value
        elif field == "department":
            # Проверяем по текущим предустановкам, а не по значению при создании
            self._check_department(new_value)
            student.department = new_value
        elif field == "major":
            self._check_major(new_value)
            student.major = new_value
        elif field == "scores":
            self.replace_scores(index, new_value)
        else:
            raise ValidationFailedError(
                f"Поле '{field}' нельзя изменить. Доступно: {', '.join(MODIFIABLE_FIELDS)}."
            )
        return student.snapshot()

    def replace_scores(self, index: int, values) -> bool:
        """Полностью заменяет оценки студента. Возвращает True, если выставлен 0 по умолчанию."""
        student = self.student_at(index)
        scores = ScoreList()
        scores.replace_all(values)
        default_applied = scores.finalize()
        student.scores = scores
        return default_applied

    def delete(self, index: int) -> StudentSnapshot:
        """Удаляет запись; следующие записи сдвигаются на одну позицию."""
        student = self.student_at(index)
        self._students.pop(index)
        return student.snapshot()

    def list_all(self) -> List[StudentSnapshot]:
        return [s.snapshot() for s in self._students]

    def list_by_major(self, major: str) -> List[StudentSnapshot]:
        return [s.snapshot() for s in self._students if s.major == major]

    def labeled_scores(self, student_id: str):
        """Оценки студента с названиями из предустановок."""
        student = self._students[self.index_of_id(student_id)]
        return student.labeled_scores(self.presets.score_names)
