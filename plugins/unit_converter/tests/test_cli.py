import io
import json
from contextlib import redirect_stderr, redirect_stdout

import pytest

from plugins.unit_converter.cli import main


def _run_cli(args):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        main(args)
    return json.loads(buffer.getvalue())


def test_cli_convert():
    result = _run_cli(["convert", "100", "bar", "psi"])
    assert result["value"] == pytest.approx(1450.38)
    assert result["to_unit"] == "psi"


def test_cli_to_block():
    result = _run_cli(["to", "1000", "W => HP"])
    assert result == {"value": pytest.approx(1.34102), "from_unit": "W", "to_unit": "HP"}


def test_cli_convert_with_custom_units(custom_units_file):
    result = _run_cli(
        ["convert", "10", "apple", "orange", "--custom-units", str(custom_units_file)]
    )
    assert result["value"] == pytest.approx(20)


def test_cli_references_and_show():
    assert _run_cli(["references"])["references"][-1] == "CUSTOM"
    shown = _run_cli(["show", "temperature", "--object"])
    assert shown["reference"] == "TEMPERATURE"
    assert shown["units"] == {"C": 0, "F": 32, "K": -273.15, "R": 491.67}
    assert _run_cli(["units", "temperature"])["units"] == ["C", "F", "K", "R"]


def test_cli_find_and_info():
    assert _run_cli(["find", "invalidUnit"]) == {"unit": "invalidUnit", "found": False}
    assert _run_cli(["find", "psi"])["reference"] == "PRESSURE"
    assert "version" in _run_cli(["info"])


def test_cli_reports_errors_on_stderr():
    stderr = io.StringIO()
    with redirect_stderr(stderr), pytest.raises(SystemExit) as excinfo:
        main(["to", "100", "bar > psi"])
    assert excinfo.value.code == 2
    assert "Checking conversion block failed!" in stderr.getvalue()


def test_cli_inspects_custom_units(custom_units_file):
    path = str(custom_units_file)
    shown = _run_cli(["show", "CUSTOM::FRUIT", "--object", "--custom-units", path])
    assert shown["units"] == {"apple": 1.0, "orange": 2.0, "banana": 0.5}
    units = _run_cli(["units", "fruit", "--custom-units", path])
    assert units["units"] == ["apple", "orange", "banana"]
    found = _run_cli(["find", "banana", "--custom-units", path])
    assert found == {"unit": "banana", "found": True, "reference": "CUSTOM::FRUIT", "factor": 0.5}
