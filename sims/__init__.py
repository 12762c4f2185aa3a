"""Students' Information Management System: реестр студентов в памяти."""
from .config import SOFTWARE_VERSION as __version__
from .errors import StudentAppError
from .models import ScoreList, Student, StudentCandidate, StudentSnapshot
from .presets import PresetList, PresetRegistry
from .registry import Registry

__all__ = [
    "StudentAppError",
    "ScoreList", "Student", "StudentCandidate", "StudentSnapshot",
    "PresetList", "PresetRegistry",
    "Registry",
]
