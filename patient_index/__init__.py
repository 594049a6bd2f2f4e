"""
Patient Index — Класифікація записів пацієнтів

Архітектура: парсер CSV → побудова записів → класифікатор → JSON документи

Модулі:
- config: Конфігурація системи (парсер, мапінг колонок, вивід)
- schemas: Pydantic моделі Patient та SymptomGroup
- parsing: Розбір рядків з лапками та побудова записів
- nlp: Нормалізація тексту симптомів
- classification: Групування за id, регіоном та симптомами
- output: Побудова та серіалізація вихідних документів
- storage: Джерело та приймачі даних
- pipeline: Повний конвеєр обробки
- cli: Командний рядок
"""

__version__ = "1.0.0"

from .schemas import Patient, SymptomGroup
from .config import PatientIndexConfig, get_default_config
from .pipeline import run_pipeline, load_patients
