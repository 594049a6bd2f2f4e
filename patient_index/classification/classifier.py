"""
Patient Index — Класифікатор

Один прохід по впорядкованому списку пацієнтів дає три групування:
- by_id: patient_id → Patient (останній запис перемагає)
- by_region: region → пацієнти в порядку надходження
- by_symptom: нормалізований ключ → SymptomGroup

Порядок ключів — порядок першої появи. Результат незмінний.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from patient_index.nlp.symptom_normalizer import normalize_symptom
from patient_index.schemas.patient import Patient, SymptomGroup


@dataclass(frozen=True)
class Classification:
    """
    Три групування одного набору даних.

    Приклад:
        result = classify(patients)
        result.by_region["North"]        # (Patient, Patient)
        result.by_symptom_groups[0].label  # "Fever and cough"
    """
    by_id: Mapping[str, Patient] = field(default_factory=lambda: MappingProxyType({}))
    by_region: Mapping[str, Tuple[Patient, ...]] = field(default_factory=lambda: MappingProxyType({}))
    by_symptom: Mapping[str, SymptomGroup] = field(default_factory=lambda: MappingProxyType({}))

    # patient_id, які були перезаписані пізнішим записом
    duplicate_ids: Tuple[str, ...] = ()
    patient_count: int = 0

    @property
    def by_symptom_groups(self) -> List[SymptomGroup]:
        """Групи симптомів у порядку group_id"""
        return list(self.by_symptom.values())

    def summary(self) -> Dict[str, int]:
        """Статистика класифікації"""
        return {
            "patients": self.patient_count,
            "ids": len(self.by_id),
            "regions": len(self.by_region),
            "symptom_groups": len(self.by_symptom),
            "duplicates": len(self.duplicate_ids),
        }


def classify(patients: Iterable[Patient]) -> Classification:
    """
    Класифікувати пацієнтів.

    Args:
        patients: Пацієнти в порядку вхідного файлу

    Returns:
        Classification з трьома групуваннями
    """
    by_id: Dict[str, Patient] = {}
    by_region: Dict[str, List[Patient]] = {}
    symptom_members: Dict[str, List[Patient]] = {}
    symptom_labels: Dict[str, str] = {}
    duplicates: List[str] = []
    count = 0

    for patient in patients:
        count += 1

        if patient.patient_id in by_id:
            duplicates.append(patient.patient_id)
        by_id[patient.patient_id] = patient

        by_region.setdefault(patient.region, []).append(patient)

        if not patient.symptoms:
            continue

        key = normalize_symptom(patient.symptoms)
        if key not in symptom_members:
            symptom_members[key] = []
            symptom_labels[key] = patient.symptoms
        symptom_members[key].append(patient)

    by_symptom = {
        key: SymptomGroup(
            group_id=group_id,
            key=key,
            label=symptom_labels[key],
            patients=tuple(members),
        )
        for group_id, (key, members) in enumerate(symptom_members.items(), start=1)
    }

    return Classification(
        by_id=MappingProxyType(by_id),
        by_region=MappingProxyType({region: tuple(members) for region, members in by_region.items()}),
        by_symptom=MappingProxyType(by_symptom),
        duplicate_ids=tuple(duplicates),
        patient_count=count,
    )
