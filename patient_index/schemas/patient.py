"""
Patient Index — Схеми даних пацієнта

Pydantic моделі для:
- Patient: один запис з вхідного файлу
- SymptomGroup: група пацієнтів з еквівалентними симптомами

Обидві моделі незмінні після створення (frozen).
"""

from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field


# Атрибути пацієнта, які можна мапити на колонки
PATIENT_FIELDS: Tuple[str, ...] = (
    "patient_id",
    "name",
    "age",
    "gender",
    "region",
    "symptoms",
)


class Patient(BaseModel):
    """
    Запис пацієнта.

    Усі рядкові поля за замовчуванням порожні, вік — 0.
    Серіалізація з by_alias=True дає camelCase-імена вихідних документів.

    Приклад:
        patient = Patient(patient_id="P1", name="Alice", age=34, region="North")
        patient.model_dump(by_alias=True)
        # {'patientId': 'P1', 'name': 'Alice', 'age': 34, ...}
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    patient_id: str = Field(default="", alias="patientId", description="ID пацієнта")
    name: str = Field(default="", description="Ім'я")
    age: int = Field(default=0, description="Вік (0 якщо невідомий)")
    gender: str = Field(default="", description="Стать")
    region: str = Field(default="", description="Регіон")
    symptoms: str = Field(default="", description="Симптоми (сирий текст)")

    @property
    def has_symptoms(self) -> bool:
        return bool(self.symptoms)


class SymptomGroup(BaseModel):
    """
    Група пацієнтів з однаковим нормалізованим ключем симптомів.

    label — перший сирий текст симптомів, що трапився для цього ключа.
    """
    model_config = ConfigDict(frozen=True)

    group_id: int = Field(..., ge=1, description="Порядковий номер групи (з 1)")
    key: str = Field(..., description="Нормалізований ключ")
    label: str = Field(..., description="Людиночитна назва групи")
    patients: Tuple[Patient, ...] = Field(default_factory=tuple)

    @property
    def size(self) -> int:
        return len(self.patients)
