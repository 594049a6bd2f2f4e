"""
Patient Index — Модуль виводу (output)

Компоненти:
- emitter: групування → дерева словників/списків
- writer: дерево → JSON текст (відступ 2 пробіли)
"""

from .emitter import (
    patient_fields,
    emit_id_tree,
    emit_region_tree,
    emit_symptom_tree,
    emit_all,
)
from .writer import dumps_tree, write_json


__all__ = [
    "patient_fields",
    "emit_id_tree",
    "emit_region_tree",
    "emit_symptom_tree",
    "emit_all",
    "dumps_tree",
    "write_json",
]
