# sims/errors.py
"""Модуль для определения пользовательских исключений системы учета студентов.

Любая операция ядра либо возвращает результат, либо выбрасывает ровно одно
из этих исключений. Состояние при этом никогда не остается изменённым
наполовину.
"""


class StudentAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass


class ValidationFailedError(StudentAppError):
    """Некорректное значение поля: имя, пол, номер, класс или оценка."""
    pass


class OutOfRangeError(ValidationFailedError):
    """Оценка вне диапазона 0-100."""
    pass


class DuplicateIdentifierError(StudentAppError):
    """Исключение при попытке добавить студента с уже существующим номером."""
    pass


class DuplicateEntryError(StudentAppError):
    """Такое значение уже есть в списке предустановок."""
    pass


class PresetsMissingError(StudentAppError):
    """Не заданы предустановки факультетов или специальностей."""
    pass


class CapacityExceededError(StudentAppError):
    """Реестр заполнен до максимальной вместимости."""
    pass


class NotFoundError(StudentAppError):
    """Исключение, когда студент или позиция в списке не найдены."""
    pass


class AllocationFailedError(StudentAppError):
    """Не хватило памяти при расширении коллекции."""
    pass
