"""
Patient Index — Модуль класифікації

Приклад використання:
    from patient_index.classification import classify

    result = classify(patients)
    print(result.summary())
    # {'patients': 2, 'ids': 2, 'regions': 1, 'symptom_groups': 1, 'duplicates': 0}
"""

from .classifier import Classification, classify


__all__ = [
    "Classification",
    "classify",
]
