"""
Patient Index — NLP модуль

Нормалізація тексту симптомів для групування еквівалентних описів.

Приклад використання:
    from patient_index.nlp import normalize_symptom

    normalize_symptom("Fever, Cough") == normalize_symptom("cough fever")  # True
"""

from .symptom_normalizer import (
    normalize_symptom,
    symptom_tokens,
)


__all__ = [
    'normalize_symptom',
    'symptom_tokens',
]
