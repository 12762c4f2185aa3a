# sims/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для учета студентов."""
import logging
import sys
import traceback
from typing import Callable, List, Optional

from . import config, errors
from .models import StudentCandidate, StudentSnapshot
from .presets import PresetList
from .registry import Registry
from .validators import (
    is_blank, is_valid_class_label, is_valid_gender, is_valid_identifier, is_valid_name, parse_score,
)

logger = logging.getLogger(__name__)

LINE = "=" * 40


def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + LINE)
    print("   СИСТЕМА УЧЕТА СТУДЕНТОВ")
    print(LINE)
    print("1. Инструкция")
    print("2. Добавить студента")
    print("3. Показать студентов")
    print("4. Найти студента")
    print("5. Изменить данные студента")
    print("6. Удалить студента")
    print("7. Предустановки факультетов")
    print("8. Предустановки специальностей")
    print("9. Предустановки названий оценок")
    print("A. О программе")
    print("0. Выход")
    print(LINE)


def show_instructions():
    print("\n--- Инструкция ---")
    print("1. Сначала задайте факультеты (7) и специальности (8).")
    print("2. По желанию задайте названия оценок (9) - они будут подсказками при вводе.")
    print("3. Оценки вводятся по одной, ввод завершается словом 'end'.")
    print("4. Если не введено ни одной оценки, выставляется 0.")


def show_about():
    print(f"\n{config.SOFTWARE_NAME} v{config.SOFTWARE_VERSION}")
    print(f"Лицензия: {config.SOFTWARE_LICENSE}")


def ask(prompt: str) -> str:
    return input(prompt).strip()


def ask_yes(prompt: str) -> bool:
    return ask(prompt).lower() == "y"


def prompt_until(prompt: str, check: Callable[[str], bool], error_msg: str) -> str:
    """Повторяет вопрос, пока ответ не пройдет проверку."""
    while True:
        value = ask(prompt)
        if check(value):
            return value
        print(f"❌ {error_msg}")


def print_preset_list(presets: PresetList, title: str):
    entries = presets.list()
    if not entries:
        print(f"ℹ️ Список пуст ({title}).")
        return
    print(f"\n--- {title} ---")
    for i, entry in enumerate(entries, start=1):
        print(f"{i:>2}. {entry}")


def choose_preset(presets: PresetList, title: str) -> str:
    """Выбор значения из предустановок по номеру (с 1)."""
    while True:
        print_preset_list(presets, title)
        raw = ask(f"Выберите номер (1-{len(presets)}): ")
        try:
            return presets.select(int(raw))
        except (ValueError, errors.NotFoundError):
            print("❌ Неверный номер, попробуйте еще раз.")


def input_scores(registry: Registry) -> List[float]:
    """Ввод оценок по одной до слова 'end'."""
    score_names = registry.presets.score_names
    if len(score_names):
        print(f"Названия оценок: {', '.join(score_names.list())}")
    print(f"Введите оценки (0-100), '{config.END_TOKEN}' - закончить ввод.")

    values: List[float] = []
    while True:
        label = score_names.label_for(len(values)) or f"Оценка {len(values) + 1}"
        raw = ask(f"{label}: ")
        if raw == config.END_TOKEN:
            return values
        try:
            values.append(parse_score(raw))
        except errors.ValidationFailedError as e:
            print(f"❌ {e}")


def print_student(registry: Registry, student: StudentSnapshot):
    gender = "м" if student.gender == "male" else "ж"
    scores = []
    for label, value in registry.labeled_scores(student.student_id):
        scores.append(f"{label}: {value:.2f}" if label else f"{value:.2f}")
    print("-" * 40)
    print(f"Имя: {student.name}")
    print(f"Номер: {student.student_id}")
    print(f"Пол: {gender}")
    print(f"Класс: {student.class_name}")
    print(f"Факультет: {student.department}")
    print(f"Специальность: {student.major}")
    print(f"Оценки: {', '.join(scores)}")
    print(f"Сумма баллов: {student.total:.2f}")


def add_student_flow(registry: Registry):
    if not registry.has_required_presets():
        print("⚠️ Сначала задайте предустановки факультетов и специальностей.")
        return
    if registry.is_full():
        print(f"⚠️ Реестр заполнен (максимум {registry.capacity} студентов).")
        return

    name = prompt_until("Имя: ", is_valid_name, "Имя должно содержать от 1 до 20 символов.")
    gender = prompt_until("Пол (м/ж): ", is_valid_gender, "Пол недопустим. Введите 'м' или 'ж'.")
    while True:
        student_id = prompt_until("Номер (4-20 букв и цифр): ", is_valid_identifier,
                                  "Номер должен состоять из 4-20 латинских букв и цифр.")
        try:
            registry.index_of_id(student_id)
        except errors.NotFoundError:
            break
        print("❌ Студент с таким номером уже существует.")
    class_name = prompt_until("Класс: ", is_valid_class_label,
                              "Класс не может быть пустым и длиннее 20 символов.")
    department = choose_preset(registry.presets.departments, "Факультеты")
    major = choose_preset(registry.presets.majors, "Специальности")
    scores = input_scores(registry)

    student = registry.add_student(StudentCandidate(
        name=name, gender=gender, student_id=student_id, class_name=class_name,
        department=department, major=major, scores=scores,
    ))
    logger.info("Добавлен студент %s", student.student_id)
    if not scores:
        print("ℹ️ Оценки не введены, выставлен 0 по умолчанию.")
    print(f"✅ Студент {student.name} успешно добавлен.")


def view_students_flow(registry: Registry):
    print("1. Все студенты")
    print("2. По специальности")
    choice = ask("Выберите пункт: ")
    if choice not in ("1", "2"):
        print("❌ Неверный выбор.")
        return

    if choice == "1":
        students = registry.list_all()
        if not students:
            print("ℹ️ Список студентов пуст.")
            return
        print(f"\n--- Всего студентов: {len(students)} ---")
    else:
        if not len(registry.presets.majors):
            print("⚠️ Предустановки специальностей не заданы.")
            return
        major = choose_preset(registry.presets.majors, "Специальности")
        students = registry.list_by_major(major)
        if not students:
            print(f"ℹ️ По специальности '{major}' студентов нет.")
            return
        print(f"\n--- {major}: {len(students)} студентов ---")

    for s in students:
        print_student(registry, s)


def search_flow(registry: Registry):
    if not len(registry):
        print("ℹ️ Список студентов пуст.")
        return
    print("1. По имени")
    print("2. По номеру")
    choice = ask("Выберите способ поиска: ")
    if choice == "1":
        query = ask("Введите имя: ")
        if is_blank(query):
            print("❌ Имя не может быть пустым.")
            return
        student = registry.find_by_name(query)
    elif choice == "2":
        query = ask("Введите номер: ")
        if is_blank(query):
            print("❌ Номер не может быть пустым.")
            return
        student = registry.find_by_id(query)
    else:
        print("❌ Неверный выбор.")
        return
    print_student(registry, student)


def locate_student(registry: Registry) -> Optional[int]:
    """Поиск по номеру, а если не найден - по имени (после подтверждения)."""
    student_id = ask("Введите номер студента: ")
    try:
        return registry.index_of_id(student_id)
    except errors.NotFoundError:
        if not ask_yes("Студент с таким номером не найден. Искать по имени? (y/n): "):
            return None
    return registry.index_of_name(ask("Введите имя: "))


def modify_flow(registry: Registry):
    if not len(registry):
        print("ℹ️ Список студентов пуст.")
        return
    index = locate_student(registry)
    if index is None:
        return

    while True:
        print_student(registry, registry.student_at(index).snapshot())
        print("1. Имя  2. Пол  3. Класс  4. Факультет  5. Специальность  6. Оценки  0. Готово")
        choice = ask("Что изменить: ")
        try:
            if choice == "1":
                registry.modify(index, "name", ask("Новое имя: "))
            elif choice == "2":
                registry.modify(index, "gender", ask("Новый пол (м/ж): "))
            elif choice == "3":
                registry.modify(index, "class_name", ask("Новый класс: "))
            elif choice == "4":
                if not len(registry.presets.departments):
                    print("⚠️ Предустановки факультетов не заданы.")
                    continue
                registry.modify(index, "department",
                                choose_preset(registry.presets.departments, "Факультеты"))
            elif choice == "5":
                if not len(registry.presets.majors):
                    print("⚠️ Предустановки специальностей не заданы.")
                    continue
                registry.modify(index, "major", choose_preset(registry.presets.majors, "Специальности"))
            elif choice == "6":
                if registry.replace_scores(index, input_scores(registry)):
                    print("ℹ️ Оценки не введены, выставлен 0 по умолчанию.")
            elif choice == "0":
                break
            else:
                print("❌ Неверный выбор.")
                continue
            logger.info("Изменен студент %s", registry.student_at(index).student_id)
            print("✅ Изменено.")
        except errors.ValidationFailedError as e:
            print(f"❌ Ошибка данных: {e}")


def delete_flow(registry: Registry):
    if not len(registry):
        print("ℹ️ Список студентов пуст.")
        return
    print("1. Удалить по номеру")
    print("2. Удалить по имени")
    if ask("Выберите способ: ") == "2":
        index = registry.index_of_name(ask("Введите имя: "))
    else:
        index = locate_student(registry)
        if index is None:
            return

    print(registry.student_at(index))
    if not ask_yes("⚠️ Запись будет удалена навсегда. Удалить? (y/n): "):
        print("ℹ️ Удаление отменено.")
        return
    student = registry.delete(index)
    logger.info("Удален студент %s", student.student_id)
    print(f"✅ Студент с номером {student.student_id} успешно удален.")


def manage_presets_flow(presets: PresetList, title: str):
    while True:
        print_preset_list(presets, title)
        print("1. Добавить  2. Очистить все  0. Назад")
        choice = ask("Выберите пункт: ")
        if choice == "1":
            while True:
                name = ask(f"Новое значение ('{config.END_TOKEN}' - закончить): ")
                if name == config.END_TOKEN:
                    break
                try:
                    presets.add(name)
                    logger.info("Добавлена предустановка (%s): %s", presets.kind, name)
                    print(f"✅ Добавлено: {name}")
                except (errors.ValidationFailedError, errors.DuplicateEntryError) as e:
                    print(f"❌ {e}")
        elif choice == "2":
            if ask_yes("Очистить все значения? (y/n): "):
                presets.clear_all()
                logger.info("Очищены предустановки (%s)", presets.kind)
                print("✅ Список очищен.")
        elif choice == "0":
            return
        else:
            print("❌ Неверный выбор.")


def main_cli(registry: Optional[Registry] = None):
    """Основной цикл консольного приложения."""
    if registry is None:
        registry = Registry(config.get_capacity())

    actions = {
        "1": show_instructions,
        "2": lambda: add_student_flow(registry),
        "3": lambda: view_students_flow(registry),
        "4": lambda: search_flow(registry),
        "5": lambda: modify_flow(registry),
        "6": lambda: delete_flow(registry),
        "7": lambda: manage_presets_flow(registry.presets.departments, "Факультеты"),
        "8": lambda: manage_presets_flow(registry.presets.majors, "Специальности"),
        "9": lambda: manage_presets_flow(registry.presets.score_names, "Названия оценок"),
        "a": show_about,
    }

    while True:
        print_menu()
        try:
            choice = ask("Выберите пункт меню: ").lower()
            if choice == "0":
                print("👋 До свидания!")
                break
            action = actions.get(choice)
            if action is None:
                print("❌ Неверный выбор. Пожалуйста, введите 0-9 или A.")
                continue
            action()
        except errors.StudentAppError as e:
            logger.debug("Операция отклонена: %r", e)
            print(f"❌ Ошибка: {e}")
        except EOFError:
            print("\n👋 До свидания!")
            break
        except Exception as e:
            logger.exception("Непредвиденная ошибка")
            print(f"❌ Произошла непредвиденная ошибка: {e}")
    return registry


def run():
    """Точка входа консольного скрипта."""
    logging.basicConfig(level=config.get_log_level(), format=config.LOG_FORMAT)
    try:
        main_cli()
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    run()
