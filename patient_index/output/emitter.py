"""
Patient Index — Побудова вихідних документів

Перетворює групування на дерева зі словників, списків і скалярів.
Текст із дерева робить тільки output.writer.
"""

from typing import Any, Dict, List, Optional

from patient_index.classification.classifier import Classification
from patient_index.config.settings import OutputConfig
from patient_index.schemas.patient import Patient


def patient_fields(patient: Patient) -> Dict[str, Any]:
    """{patientId, name, age, gender, region, symptoms}"""
    return patient.model_dump(by_alias=True)


def emit_id_tree(classification: Classification) -> List[Dict[str, Any]]:
    return [
        {"patientId": patient_id, "patient": patient_fields(patient)}
        for patient_id, patient in classification.by_id.items()
    ]


def emit_region_tree(classification: Classification) -> List[Dict[str, Any]]:
    return [
        {"region": region, "patients": [patient_fields(p) for p in patients]}
        for region, patients in classification.by_region.items()
    ]


def emit_symptom_tree(classification: Classification) -> List[Dict[str, Any]]:
    return [
        {
            "symptomGroupId": group.group_id,
            "symptomLabel": group.label,
            "patients": [patient_fields(p) for p in group.patients],
        }
        for group in classification.by_symptom.values()
    ]


def emit_all(
    classification: Classification,
    output: Optional[OutputConfig] = None,
) -> Dict[str, List[Dict[str, Any]]]:
    """
    Всі три дерева, ключ — ім'я вихідного файлу.

    Приклад:
        trees = emit_all(result)
        trees["region_output.json"][0]["region"]  # "North"
    """
    output = output or OutputConfig()
    return {
        output.id_file: emit_id_tree(classification),
        output.region_file: emit_region_tree(classification),
        output.symptom_file: emit_symptom_tree(classification),
    }
