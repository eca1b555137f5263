"""Command-line front end behaviour."""

import json
import logging
import os

import pytest

from labcalc.cli import main, parse_fields


class TestParseFields:
    def test_numbers_and_strings(self):
        fields = parse_fields(["value=100", "from_unit=c", "to_unit=f"])
        assert fields == {"value": 100.0, "from_unit": "c", "to_unit": "f"}

    def test_data_is_split_on_commas(self):
        fields = parse_fields(["data=1,2.5,x,"])
        assert fields == {"data": [1.0, 2.5, "x"]}

    @pytest.mark.parametrize("token", ["value", "=3"])
    def test_bad_token(self, token):
        with pytest.raises(ValueError, match="key=value"):
            parse_fields([token])


def test_text_output(capsys):
    code = main(["unit_convert", "value=100", "from_unit=c", "to_unit=f"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.strip() == "100 c = 212 f"


def test_json_output(capsys):
    code = main(["dilution", "c1=10", "v1=5", "c2=2", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["ok"] is True
    assert payload["operation"] == "dilution"
    assert payload["result"]["v2"] == 25.0


def test_error_exit_code_and_warning(capsys, caplog):
    caplog.set_level(logging.WARNING, logger="labcalc.cli")
    code = main(["unit_convert", "value=1", "from_unit=m", "to_unit=c"])
    out = capsys.readouterr().out
    assert code == 1
    assert out.startswith("Error: cannot convert length")
    assert any(
        rec.levelno == logging.WARNING and "IncompatibleCategories" in rec.getMessage()
        for rec in caplog.records
    )


def test_error_json_output(capsys):
    code = main(["constants", "constant=unobtainium", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["ok"] is False
    assert payload["error"]["kind"] == "UnknownConstant"


def test_list_units_and_constants(capsys):
    assert main(["--list-units", "--list-constants"]) == 0
    out = capsys.readouterr().out
    assert "temperature (base: k):" in out
    assert "avogadro [na]:" in out


def test_statistics_with_interval(capsys):
    code = main(["statistics", "data=1,2,3,4,5", "--ci", "0.95", "--json"])
    payload = json.loads(capsys.readouterr().out)
    ci = payload["confidence_interval"]
    assert code == 0
    assert ci["dof"] == 4
    assert ci["lower"] < payload["result"]["mean"] < ci["upper"]


def test_statistics_with_plot(capsys, tmp_path):
    code = main(["statistics", "data=2,4,4,5,7", "--plot", str(tmp_path)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Saved distribution figure to" in out
    assert os.path.exists(tmp_path / "sample_distribution.png")


@pytest.mark.parametrize("argv", [[], ["statistics", "data"]])
def test_usage_errors_exit_with_2(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_single_value_interval_json_is_strict(capsys):
    code = main(["statistics", "data=2", "--ci", "0.95", "--json"])
    out = capsys.readouterr().out

    def reject(token):
        raise ValueError(f"non-standard JSON token {token}")

    payload = json.loads(out, parse_constant=reject)
    ci = payload["confidence_interval"]
    assert code == 0
    assert ci["method"] == "undefined"
    assert ci["half_width"] is None
    assert ci["lower"] is None
    assert ci["upper"] is None
    assert ci["mean"] == 2.0


def test_non_finite_error_details_are_strict_json(capsys):
    code = main(["dilution", "c1=inf", "v1=5", "c2=2", "--json"])
    payload = json.loads(capsys.readouterr().out, parse_constant=lambda token: pytest.fail(token))
    assert code == 1
    assert payload["error"]["kind"] == "NonFiniteValue"
    assert payload["error"]["field"] == "c1"
    assert payload["error"]["value"] is None
