"""Patient Index — Завантаження конфігурації"""
import yaml
from pathlib import Path
from dataclasses import asdict
from typing import Any, Dict, Optional

from patient_index.errors import ConfigError
from .settings import (
    PatientIndexConfig,
    ParserConfig,
    ColumnMapping,
    RecordConfig,
    OutputConfig,
    LoggingConfig,
)


def config_to_dict(config: PatientIndexConfig) -> dict:
    data = asdict(config)
    # Мапінг колонок у YAML — впорядкований словник, а не список пар
    data["records"]["columns"] = {name: index for name, index in config.records.columns.columns}
    return data


def _columns_from_yaml(raw: Any) -> ColumnMapping:
    if isinstance(raw, dict):
        return ColumnMapping.from_dict(raw)
    if isinstance(raw, str):
        return ColumnMapping.from_spec(raw)
    if isinstance(raw, list):
        columns = []
        for item in raw:
            if not isinstance(item, dict) or "field" not in item or "index" not in item:
                raise ConfigError(f"Column list entries need 'field' and 'index' keys, got {item!r}")
            columns.append((item["field"], item["index"]))
        return ColumnMapping(columns=columns)
    raise ConfigError(f"Unsupported columns value: {raw!r}")


def _section(data: dict, name: str) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section {name!r} must be a mapping")
    return dict(section)


def config_from_dict(data: Optional[Dict[str, Any]]) -> PatientIndexConfig:
    """Побудувати PatientIndexConfig зі словника (наприклад, з YAML)"""
    data = data or {}
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping")

    try:
        records = _section(data, "records")
        if "columns" in records:
            records["columns"] = _columns_from_yaml(records["columns"])

        top_level = {k: v for k, v in data.items() if k in ("version", "project_name")}

        return PatientIndexConfig(
            parser=ParserConfig(**_section(data, "parser")),
            records=RecordConfig(**records),
            output=OutputConfig(**_section(data, "output")),
            logging=LoggingConfig(**_section(data, "logging")),
            **top_level,
        )
    except TypeError as e:
        raise ConfigError(f"Invalid config: {e}") from e


def save_yaml(config: PatientIndexConfig, path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config_to_dict(config), f, default_flow_style=False, sort_keys=False)


def load_yaml(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def save_config(config: PatientIndexConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> PatientIndexConfig:
    return config_from_dict(load_yaml(path))
