"""
Patient Index — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Приклад використання:
    from patient_index.schemas import Patient, SymptomGroup

    patient = Patient(patient_id="P1", name="Alice", age=34)
    json_data = patient.model_dump_json(by_alias=True)
"""

from .patient import (
    PATIENT_FIELDS,
    Patient,
    SymptomGroup,
)


__all__ = [
    "PATIENT_FIELDS",
    "Patient",
    "SymptomGroup",
]
