# tests/conftest.py
import pytest
from sims.models import StudentCandidate
from sims.presets import PresetRegistry
from sims.registry import Registry


@pytest.fixture
def presets() -> PresetRegistry:
    """Фикстура с заданными факультетами, специальностями и названиями оценок."""
    p = PresetRegistry()
    p.departments.add("CS")
    p.departments.add("Math")
    p.majors.add("SE")
    p.majors.add("AI")
    p.score_names.add("Экзамен")
    return p


@pytest.fixture
def make_candidate():
    """Фабрика кандидатов с корректными значениями по умолчанию."""
    def _make(**overrides) -> StudentCandidate:
        fields = dict(
            name="Tom", gender="M", student_id="A001", class_name="C1",
            department="CS", major="SE", scores=[90, 80],
        )
        fields.update(overrides)
        return StudentCandidate(**fields)
    return _make


@pytest.fixture
def registry(presets, make_candidate) -> Registry:
    """Реестр с тремя студентами."""
    r = Registry(10, presets)
    r.add_student(make_candidate(name="Alice", student_id="S001"))
    r.add_student(make_candidate(name="Alicia", student_id="S002", gender="F", major="AI"))
    r.add_student(make_candidate(name="Bob", student_id="S003", scores=[]))
    return r
