"""
Patient Index — Нормалізатор симптомів

Канонічний ключ для порівняння вільного тексту симптомів:
"Fever, Cough" і "cough fever" дають однаковий ключ "cough fever".

Тільки ASCII: lowercase, усе крім [a-z0-9] і пробілів видаляється.
"""

import re
from typing import List, Optional


_NON_KEY_CHARS = re.compile(r"[^a-z0-9\s]")


def symptom_tokens(text: Optional[str]) -> List[str]:
    """Відсортовані токени, з яких будується ключ"""
    if not text:
        return []
    cleaned = _NON_KEY_CHARS.sub("", text.lower())
    return sorted(cleaned.split())


def normalize_symptom(text: Optional[str]) -> str:
    """
    Нормалізувати текст симптомів.

    Чиста детермінована функція; ідемпотентна:
    normalize_symptom(normalize_symptom(s)) == normalize_symptom(s)

    Приклад:
        >>> normalize_symptom("Fever and cough")
        'and cough fever'
    """
    return " ".join(symptom_tokens(text))
