"""
Patient Index — Конвеєр обробки

Рядки → поля → Patient → класифікація → три JSON документи.

Увесь список пацієнтів матеріалізується в пам'яті до класифікації.
Попередження парсингу логуються тут; помилки сховища (StorageError)
передаються далі і зупиняють запуск.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from patient_index.classification.classifier import Classification, classify
from patient_index.config.settings import PatientIndexConfig, get_default_config
from patient_index.output.emitter import emit_all
from patient_index.output.writer import write_json
from patient_index.parsing.line_parser import LogicalRecord, iter_logical_records, parse_line
from patient_index.parsing.record_builder import ParseWarning, RecordBuilder, WarningKind
from patient_index.schemas.patient import Patient
from patient_index.storage import LocalStorage

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Результат читання записів"""
    patients: List[Patient] = field(default_factory=list)
    warnings: List[ParseWarning] = field(default_factory=list)
    total_rows: int = 0
    skipped_rows: int = 0


@dataclass
class PipelineReport:
    """Підсумок запуску"""
    total_rows: int
    skipped_rows: int
    warnings: List[ParseWarning]
    summary: Dict[str, int]
    outputs: List[str]


def _record_warnings(record: LogicalRecord) -> List[ParseWarning]:
    """Попередження про межі запису (склеєні рядки, незакриті лапки)"""
    warnings = []
    if record.line_count > 1:
        warnings.append(ParseWarning(
            kind=WarningKind.MULTILINE_RECORD,
            message=f"Record spans lines {record.line_number}-{record.last_line} (quoted line break)",
            line_number=record.line_number,
        ))
    if record.unterminated:
        warnings.append(ParseWarning(
            kind=WarningKind.UNTERMINATED_QUOTE,
            message="Quote is never closed; reading following lines as separate records",
            line_number=record.line_number,
            value=record.text,
        ))
    return warnings


def load_patients(lines: Iterable[str], config: Optional[PatientIndexConfig] = None) -> LoadResult:
    """
    Прочитати пацієнтів з потоку рядків.

    Args:
        lines: Фізичні рядки (відкритий файл або список)
        config: Конфігурація; None — за замовчуванням

    Returns:
        LoadResult з пацієнтами в порядку файлу
    """
    config = config or get_default_config()
    parser = config.parser
    builder = RecordBuilder(config.records.columns, min_fields=config.records.min_fields)
    result = LoadResult()

    lines = iter(lines)
    first_line = 1
    if parser.skip_header:
        next(lines, None)
        first_line += 1

    records = iter_logical_records(
        lines,
        quote=parser.quote,
        join_multiline=parser.join_multiline,
        first_line=first_line,
    )
    for record in records:
        start_line = record.line_number

        if not record.text.strip():
            logger.debug(f"Skipping blank line {start_line}")
            continue

        result.total_rows += 1
        record_warnings = _record_warnings(record)
        fields = parse_line(record.text, delimiter=parser.delimiter, quote=parser.quote)
        built = builder.build(fields, line_number=start_line)
        record_warnings.extend(built.warnings)

        for warning in record_warnings:
            logger.warning(str(warning))
        result.warnings.extend(record_warnings)

        if built.skipped:
            logger.warning(f"Skipping invalid line {start_line}: {record.text!r}")
            result.skipped_rows += 1
            continue

        result.patients.append(built.patient)

    return result


def write_outputs(
    classification: Classification,
    output_location: str,
    config: PatientIndexConfig,
    storage: LocalStorage,
) -> List[str]:
    """Записати три документи; повертає шляхи записаних файлів"""
    written = []
    for name, tree in emit_all(classification, config.output).items():
        target = storage.join(output_location, name)
        with storage.open_sink(target) as sink:
            write_json(tree, sink, indent=config.output.indent)
        logger.info(f"Wrote {len(tree)} entries to {target}")
        written.append(target)
    return written


def run_pipeline(
    input_location: str,
    output_location: str,
    config: Optional[PatientIndexConfig] = None,
    storage: Optional[LocalStorage] = None,
) -> PipelineReport:
    """
    Повний запуск: читання, класифікація, запис.

    Raises:
        StorageError: джерело не читається або приймач не записується
    """
    config = config or get_default_config()
    storage = storage or LocalStorage(encoding=config.parser.encoding)

    logger.info(f"Reading patients from {input_location}")
    with storage.open_source(input_location) as source:
        loaded = load_patients(source, config)

    logger.info(
        f"Loaded {len(loaded.patients)} patients "
        f"({loaded.skipped_rows} skipped, {len(loaded.warnings)} warnings)"
    )

    classification = classify(loaded.patients)
    for patient_id in classification.duplicate_ids:
        logger.warning(f"Duplicate patientId {patient_id!r}, keeping the later record")

    outputs = write_outputs(classification, output_location, config, storage)

    summary = classification.summary()
    logger.info(
        f"Classified {summary['patients']} patients: {summary['ids']} ids, "
        f"{summary['regions']} regions, {summary['symptom_groups']} symptom groups"
    )

    return PipelineReport(
        total_rows=loaded.total_rows,
        skipped_rows=loaded.skipped_rows,
        warnings=loaded.warnings,
        summary=summary,
        outputs=outputs,
    )
