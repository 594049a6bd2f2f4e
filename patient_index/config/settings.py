"""
Patient Index — Налаштування системи

Всі параметри зібрані в dataclass-и для:
- Типізації та валідації
- Легкого доступу через config.parser.delimiter
- Серіалізації в YAML
"""

from dataclasses import dataclass, field
from logging import getLevelName
from typing import Dict, List, Tuple

from patient_index.errors import ConfigError
from patient_index.schemas.patient import PATIENT_FIELDS


# =============================================================================
# PARSER CONFIGURATION
# =============================================================================

@dataclass
class ParserConfig:
    """Параметри парсингу рядків"""

    delimiter: str = ","
    quote: str = '"'

    # Перший рядок файлу — заголовок, читається і відкидається
    skip_header: bool = True

    # Склеювати фізичні рядки, поки лапки не закриті
    join_multiline: bool = True

    encoding: str = "utf-8"

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise ConfigError(f"Delimiter must be a single character, got {self.delimiter!r}")
        if len(self.quote) != 1:
            raise ConfigError(f"Quote must be a single character, got {self.quote!r}")
        if self.delimiter == self.quote:
            raise ConfigError("Delimiter and quote character must differ")
        if self.delimiter in "\r\n" or self.quote in "\r\n":
            raise ConfigError("Line breaks cannot be used as delimiter or quote")


# =============================================================================
# COLUMN MAPPING
# =============================================================================

@dataclass
class ColumnMapping:
    """
    Позиційний мапінг: поле пацієнта → індекс колонки.

    Порядок пар зберігається. Якщо поле повторюється, перемагає останнє.

    Приклад:
        mapping = ColumnMapping.from_spec("patient_id=0,name=1,age=2")
        mapping.as_dict()  # {'patient_id': 0, 'name': 1, 'age': 2}
    """

    columns: List[Tuple[str, int]] = field(default_factory=list)

    def __post_init__(self):
        normalized = []
        for item in self.columns:
            try:
                name, index = item
            except (TypeError, ValueError):
                raise ConfigError(f"Column mapping entry must be a (field, index) pair, got {item!r}")

            if name not in PATIENT_FIELDS:
                raise ConfigError(
                    f"Unknown patient field {name!r}; expected one of {', '.join(PATIENT_FIELDS)}"
                )
            if isinstance(index, bool) or not isinstance(index, int):
                raise ConfigError(f"Column index for {name!r} must be an integer, got {index!r}")
            if index < 0:
                raise ConfigError(f"Column index for {name!r} must be non-negative, got {index}")

            normalized.append((name, index))
        self.columns = normalized

    @classmethod
    def from_dict(cls, mapping: Dict[str, int]) -> "ColumnMapping":
        """Створити мапінг зі словника {field: index}"""
        return cls(columns=list(mapping.items()))

    @classmethod
    def from_spec(cls, spec: str) -> "ColumnMapping":
        """
        Розібрати рядок виду "patient_id=0,name=1,symptoms=8".

        Raises:
            ConfigError: якщо пара не має формату name=index
        """
        columns = []
        for chunk in spec.split(","):
            chunk = chunk.strip()
            if not chunk:
                continue
            name, sep, raw_index = chunk.partition("=")
            if not sep:
                raise ConfigError(f"Column spec entry {chunk!r} must look like name=index")
            try:
                index = int(raw_index.strip())
            except ValueError:
                raise ConfigError(f"Column index in {chunk!r} is not an integer")
            columns.append((name.strip(), index))

        if not columns:
            raise ConfigError("Column spec is empty")
        return cls(columns=columns)

    @classmethod
    def default(cls) -> "ColumnMapping":
        """Компактна схема: id, ім'я, вік, стать, регіон, симптоми"""
        return cls.from_dict({
            "patient_id": 0,
            "name": 1,
            "age": 2,
            "gender": 3,
            "region": 4,
            "symptoms": 5,
        })

    def as_dict(self) -> Dict[str, int]:
        """Словник {field: index}, останнє входження перемагає"""
        return dict(self.columns)

    @property
    def max_index(self) -> int:
        return max((index for _, index in self.columns), default=-1)


# =============================================================================
# RECORD / OUTPUT / LOGGING
# =============================================================================

@dataclass
class RecordConfig:
    """Параметри побудови записів"""

    columns: ColumnMapping = field(default_factory=ColumnMapping.default)

    # Рядки з меншою кількістю полів вважаються зіпсованими і пропускаються
    min_fields: int = 1

    def __post_init__(self):
        if self.min_fields < 1:
            raise ConfigError(f"min_fields must be at least 1, got {self.min_fields}")


@dataclass
class OutputConfig:
    """Параметри вихідних документів"""

    id_file: str = "patient_id_output.json"
    region_file: str = "region_output.json"
    symptom_file: str = "symptom_output.json"
    indent: int = 2

    def __post_init__(self):
        for name in ("id_file", "region_file", "symptom_file"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"output.{name} must be a non-empty file name, got {value!r}")
        if not isinstance(self.indent, int) or isinstance(self.indent, bool) or self.indent < 0:
            raise ConfigError(f"output.indent must be a non-negative integer, got {self.indent!r}")


@dataclass
class LoggingConfig:
    """Параметри логування"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __post_init__(self):
        if not isinstance(self.level, str):
            raise ConfigError(f"logging.level must be a level name like 'INFO', got {self.level!r}")
        self.level = self.level.strip().upper()
        # getLevelName повертає число тільки для відомих назв рівнів
        if not isinstance(getLevelName(self.level), int):
            raise ConfigError(f"Unknown log level {self.level!r}")
        if not isinstance(self.format, str) or not self.format:
            raise ConfigError(f"logging.format must be a non-empty string, got {self.format!r}")


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class PatientIndexConfig:
    """
    Головна конфігурація Patient Index

    Приклад використання:
        config = PatientIndexConfig()
        print(config.parser.delimiter)  # ","
        print(config.records.columns.as_dict()["symptoms"])  # 5
    """

    version: str = "1.0.0"
    project_name: str = "Patient Index"

    parser: ParserConfig = field(default_factory=ParserConfig)
    records: RecordConfig = field(default_factory=RecordConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config() -> PatientIndexConfig:
    """Конфігурація за замовчуванням (компактна схема колонок)"""
    return PatientIndexConfig()
