from pathlib import Path

import pytest

FRUIT_YAML = """\
CUSTOM-UNIT:
  FRUIT:
    apple: 1.0
    orange: 2.0
    banana: 0.5
  HEAT-CAPACITY:
    J/mol.K: 1
    kJ/mol.K: 0.001
"""


@pytest.fixture
def fruit_yaml() -> str:
    return FRUIT_YAML


@pytest.fixture
def custom_units_file(tmp_path: Path) -> Path:
    path = tmp_path / "custom_units.yml"
    path.write_text(FRUIT_YAML, encoding="utf-8")
    return path
