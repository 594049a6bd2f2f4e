#!/usr/bin/env python3
"""
Patient Index — Запуск конвеєра без встановлення пакета

Запуск:
    python scripts/run_pipeline.py data/patients.csv out/
    python scripts/run_pipeline.py data/patients.csv out/ --config examples_config/wide_schema.yaml
"""

import sys
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from patient_index.cli import main


if __name__ == "__main__":
    sys.exit(main())
