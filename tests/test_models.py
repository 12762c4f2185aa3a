# tests/test_models.py
import pytest
from sims.errors import OutOfRangeError, ValidationFailedError
from sims.models import ScoreList, Student
from sims.presets import PresetList


def test_score_list_append_and_total():
    s = ScoreList()
    s.append(90)
    s.append(80.5)
    assert s.values() == (90.0, 80.5)
    assert s.total() == 170.5


def test_score_list_rejects_out_of_range():
    s = ScoreList()
    s.append(50)
    with pytest.raises(OutOfRangeError):
        s.append(120)
    assert s.values() == (50.0,)
    assert s.total() == 50.0


def test_replace_all_is_atomic():
    s = ScoreList()
    s.replace_all([10, 20])
    with pytest.raises(OutOfRangeError):
        s.replace_all([30, -1, 40])
    assert s.values() == (10.0, 20.0)
    assert s.total() == 30.0

    s.replace_all([100])
    assert s.values() == (100.0,)
    assert s.total() == 100.0


def test_finalize_empty_list():
    s = ScoreList()
    assert s.finalize() is True
    assert s.values() == (0.0,)
    assert s.total() == 0.0
    # Повторный вызов ничего не меняет
    assert s.finalize() is False
    assert len(s) == 1


def test_student_creation():
    s = Student("Тестов Тест", "ж", "T1234", "C1", "CS", "SE")
    assert s.gender == "female"
    assert s.total == 0.0
    snap = s.snapshot()
    assert snap.student_id == "T1234"
    assert snap.scores == ()


def test_student_invalid_fields():
    with pytest.raises(ValidationFailedError):
        Student("", "M", "T1234", "C1", "CS", "SE")
    with pytest.raises(ValidationFailedError):
        Student("Ann", "?", "T1234", "C1", "CS", "SE")
    with pytest.raises(ValidationFailedError):
        Student("Ann", "F", "T1", "C1", "CS", "SE")
    with pytest.raises(ValidationFailedError):
        Student("Ann", "F", "T1234", " ", "CS", "SE")


def test_labeled_scores():
    scores = ScoreList()
    scores.replace_all([100, 95])
    s = Student("Анна Котова", "F", "K0005", "C2", "CS", "SE", scores)
    names = PresetList("название оценки")
    names.add("Экзамен")
    assert s.labeled_scores(names) == [("Экзамен", 100.0), (None, 95.0)]


def test_student_str_representation(capsys):
    scores = ScoreList()
    scores.replace_all([100, 95])
    s = Student("Анна Котова", "F", "K0005", "C2", "CS", "SE", scores)
    print(s)
    captured = capsys.readouterr()
    assert "K0005" in captured.out
    assert "Анна Котова" in captured.out
    assert "195.00" in captured.out
    assert "[100.00, 95.00]" in captured.out
