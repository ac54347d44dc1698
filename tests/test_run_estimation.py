import importlib.util
from pathlib import Path

import pandas as pd
import pytest

SCRIPT = Path(__file__).parent.parent / 'scripts' / 'run_estimation.py'


@pytest.fixture(scope='module')
def cli():
    spec = importlib.util.spec_from_file_location('run_estimation', SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_defaults(cli, capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert 'ARHL estimates for a 50 year old male' in out
    assert 'PTA 5123 (SPEECH)' in out


def test_overrides_and_csv(cli, tmp_path, capsys):
    csv_path = tmp_path / 'table.csv'
    code = cli.main(['--sex', 'Female', '--age', '95',
                     '--threshold', '500=10', '--threshold', '8000=72',
                     '--csv', str(csv_path)])
    assert code == 0
    assert '80 year old female' in capsys.readouterr().out

    table = pd.read_csv(csv_path)
    assert len(table) == 7
    row = table.set_index('frequency').loc[8000]
    assert row['patient'] == 72
    assert row['patient_band'] == 'Severe'


def test_config_file_with_clear(cli, tmp_path, capsys):
    path = tmp_path / 'session.yaml'
    path.write_text("patient:\n  sex: male\n  age: 40\n  thresholds:\n    500: 10\n")
    assert cli.main(['--config', str(path), '--clear', '--scale']) == 0
    out = capsys.readouterr().out
    assert '40 year old male' in out
    assert 'ASHA Degree of Hearing Loss' in out


def test_save_plot(cli, tmp_path):
    plot_path = tmp_path / 'audiogram.png'
    assert cli.main(['--threshold', '2000=30', '--threshold', '4000=50',
                     '--save-plot', str(plot_path)]) == 0
    assert plot_path.exists()


@pytest.mark.parametrize('entry', ['500=loud', '250=10'])
def test_invalid_threshold_exits_with_error(cli, capsys, entry):
    assert cli.main(['--threshold', entry]) == 1
    assert capsys.readouterr().out.startswith('Error:')


def test_malformed_threshold_argument(cli):
    with pytest.raises(SystemExit):
        cli.main(['--threshold', '500'])


@pytest.mark.parametrize('age', ['inf', 'nan'])
def test_non_finite_age_exits_with_error(cli, capsys, age):
    assert cli.main(['--age', age]) == 1
    assert capsys.readouterr().out.startswith('Error: Age must be a finite number')


@pytest.mark.parametrize('text', ["patient:\n", "patient:\n  thresholds: [10, 20]\n"])
def test_malformed_config_exits_with_error(cli, tmp_path, capsys, text):
    path = tmp_path / 'session.yaml'
    path.write_text(text)
    assert cli.main(['--config', str(path)]) == 1
    assert capsys.readouterr().out.startswith('Error:')
