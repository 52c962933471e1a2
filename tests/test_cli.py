# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for cli.py — option parsing, error exits, and the run() pipeline.
"""
import io
import json
import sys

import h5py
import numpy as np
import pytest

from powermethod.adapters.text_reporter import TextResultReporter
from powermethod.cli import main, run
from powermethod.domain.errors import MatrixLoadError
from powermethod.domain.matrix import DenseMatrix
from powermethod.domain.power_iteration import SolverConfig
from powermethod.ports import MatrixSource


def _matrix_file(tmp_path, rows, dataset_path="/A/value", name="matrix.h5"):
    path = str(tmp_path / name)
    with h5py.File(path, 'w') as h5file:
        h5file.create_dataset(dataset_path, data=np.asarray(rows, dtype=np.float64))
    return path


class _InMemorySource(MatrixSource):
    def __init__(self, matrices):
        self.matrices = matrices
        self.requested = []

    def load_matrix(self, identifier):
        self.requested.append(identifier)
        if identifier not in self.matrices:
            raise MatrixLoadError(identifier, "file not found")
        return self.matrices[identifier]


class TestCliSolve:
    def test_default_run(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, [[2.0, 0.0], [0.0, 1.0]])
        main([path])
        out = capsys.readouterr().out
        assert "Dominant Eigenvalue: 2.000000" in out
        assert "Converged: yes" in out
        assert "Number of Processes: 1" in out

    def test_sys_argv(self, tmp_path, capsys, monkeypatch):
        path = _matrix_file(tmp_path, [[3.0, 0.0], [0.0, 1.0]])
        monkeypatch.setattr(sys, 'argv', ['powermethod', path])
        main()
        assert "Dominant Eigenvalue: 3.000000" in capsys.readouterr().out

    def test_iteration_cap_flag(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, [[2.0, 0.0], [0.0, 1.0]])
        main([path, '-m', '1'])
        out = capsys.readouterr().out
        assert "Number Of Iterations: 1" in out
        assert "Converged: no" in out

    def test_tolerance_flag(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, [[2.0, 0.0], [0.0, 1.0]])
        main([path, '-e', '0.5', '--json'])
        data = json.loads(capsys.readouterr().out)
        assert data['iterations'] < 5
        assert data['converged'] is True

    def test_json_output(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, [[2.0, 0.0], [0.0, 1.0]])
        main([path, '--json'])
        data = json.loads(capsys.readouterr().out)
        assert data['eigenvalue'] == pytest.approx(2.0, abs=1e-6)
        assert len(data['eigenvector']) == 2

    def test_dump(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, [[2.0, 0.0], [0.0, 1.0]])
        main([path, '--dump'])
        out = capsys.readouterr().out
        assert out.startswith("     2.00     0.00\n     0.00     1.00\n\n")

    def test_dataset_flag(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, [[5.0, 0.0], [0.0, 1.0]], dataset_path="/B/value")
        main([path, '--dataset', '/B/value'])
        assert "Dominant Eigenvalue: 5.000000" in capsys.readouterr().out

    def test_non_convergence_exits_zero(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, [[0.0, 4.0], [1.0, 0.0]])
        main([path, '-m', '20'])
        out = capsys.readouterr().out
        assert "Number Of Iterations: 20" in out
        assert "Converged: no" in out


class TestCliErrors:
    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "absent.h5")])
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err.lower()

    def test_non_positive_iterations(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, [[1.0]])
        with pytest.raises(SystemExit) as exc_info:
            main([path, '-m', '0'])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "number of iterations must be positive" in err
        assert "got 0" in err

    def test_non_positive_tolerance(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, [[1.0]])
        with pytest.raises(SystemExit) as exc_info:
            main([path, '-e', '-1'])
        assert exc_info.value.code == 1
        assert "tolerance must be positive" in capsys.readouterr().err

    def test_arguments_checked_before_reading(self, tmp_path, capsys):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "absent.h5"), '-m', '0'])
        assert "iterations" in capsys.readouterr().err

    def test_not_two_dimensional(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, [1.0, 2.0, 3.0])
        with pytest.raises(SystemExit) as exc_info:
            main([path])
        assert exc_info.value.code == 1
        assert "2-dimensional" in capsys.readouterr().err

    def test_zero_matrix(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, np.zeros((3, 3)))
        with pytest.raises(SystemExit) as exc_info:
            main([path])
        assert exc_info.value.code == 1
        assert "vanished" in capsys.readouterr().err

    def test_bad_option_is_usage_error(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "m.h5"), '-m', 'many'])
        assert exc_info.value.code == 2


class TestRun:
    def test_returns_result_and_timings(self):
        source = _InMemorySource({"a": DenseMatrix.from_rows([[2.0, 0.0], [0.0, 1.0]])})
        buf = io.StringIO()
        result, timings = run("a", source=source, reporter=TextResultReporter(buf))
        assert result.eigenvalue == pytest.approx(2.0, abs=1e-6)
        assert timings.iterations == result.iterations
        assert timings.read_time_s >= 0.0
        assert timings.compute_time_s >= 0.0
        assert source.requested == ["a"]
        assert "Dominant Eigenvalue" in buf.getvalue()

    def test_config_passed_through(self):
        source = _InMemorySource({"a": DenseMatrix.from_rows([[2.0, 0.0], [0.0, 1.0]])})
        result, _ = run(
            "a", config=SolverConfig(max_iterations=2),
            source=source, reporter=TextResultReporter(io.StringIO()),
        )
        assert result.iterations == 2

    def test_load_error_propagates_unchanged(self):
        source = _InMemorySource({})
        with pytest.raises(MatrixLoadError) as exc_info:
            run("missing", source=source, reporter=TextResultReporter(io.StringIO()))
        assert exc_info.value.identifier == "missing"

    def test_default_source_reads_hdf5(self, tmp_path, capsys):
        path = _matrix_file(tmp_path, [[4.0, 1.0], [1.0, 3.0]])
        result, _ = run(path)
        expected = float(np.max(np.linalg.eigvalsh([[4.0, 1.0], [1.0, 3.0]])))
        assert result.eigenvalue == pytest.approx(expected, abs=1e-5)
        assert "Dominant Eigenvalue" in capsys.readouterr().out
