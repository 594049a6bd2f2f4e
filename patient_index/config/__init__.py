"""Patient Index — Модуль конфігурації"""
from .settings import (
    PatientIndexConfig,
    get_default_config,
    ParserConfig,
    ColumnMapping,
    RecordConfig,
    OutputConfig,
    LoggingConfig,
)
from .loader import (
    save_config,
    load_config,
    save_yaml,
    load_yaml,
    config_from_dict,
    config_to_dict,
)

__all__ = [
    "PatientIndexConfig",
    "get_default_config",
    "ParserConfig",
    "ColumnMapping",
    "RecordConfig",
    "OutputConfig",
    "LoggingConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
    "config_from_dict",
    "config_to_dict",
]
