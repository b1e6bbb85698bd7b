# Path: budget_lens/tests/unit/test_main.py
"""
Tests for the budget-lens command-line entry point.

Each test runs main() against the data files laid out by the data_dir
fixture and inspects exit code and printed report.
"""

import json

import pytest

from budget_lens.constants import EXIT_DATA_ERROR, EXIT_OK, EXIT_UNKNOWN_UNIT
from budget_lens.main import build_parser, main


@pytest.fixture
def run(mock_env_vars, data_dir, reset_singletons, restore_logging, capsys):
    """Run main() with --quiet and return (exit_code, stdout)."""
    def _run(*argv):
        code = main(['--quiet', *argv])
        return code, capsys.readouterr().out
    return _run


class TestArgumentParser:
    """Test argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.back == 0
        assert not args.compare
        assert args.select is None

    def test_short_options(self):
        args = build_parser().parse_args(['-s', 'dept-va', '-b', '2', '-c'])
        assert args.select == 'dept-va'
        assert args.back == 2
        assert args.compare


class TestNavigation:
    """Test breadcrumb restoration and drilling."""

    def test_root_overview(self, run):
        code, out = run()
        assert code == EXIT_OK
        assert "Path:  Federal Budget" in out
        assert "dept-defense" in out
        assert "URL:   /budget" in out
        assert "path=" not in out

    def test_select(self, run):
        code, out = run('--select', 'dept-defense')
        assert code == EXIT_OK
        assert "Path:  Federal Budget > Department of Defense" in out
        assert "/budget?path=dept-defense" in out

    def test_restore_path_and_go_back(self, run):
        code, out = run('--path', 'dept-defense,program-f35', '--back', '1')
        assert code == EXIT_OK
        assert "Node:  Department of Defense" in out
        assert "/budget?path=dept-defense\n" in out

    def test_leaf_has_no_breakdown(self, run):
        _, out = run('--path', 'dept-defense,program-f35')
        assert "No further breakdown available" in out

    def test_unknown_select_reports_error(self, run):
        code, out = run('--select', 'ghost')
        assert code == EXIT_OK
        assert 'Item with id "ghost" not found' in out
        assert "Path:  Federal Budget\n" in out

    def test_stale_path_falls_back_to_root(self, run):
        code, out = run('--path', 'dept-defense,ghost')
        assert code == EXIT_OK
        assert "Path:  Federal Budget\n" in out

    def test_banner(self, mock_env_vars, data_dir, reset_singletons, restore_logging, capsys):
        assert main([]) == EXIT_OK
        assert "BUDGET LENS" in capsys.readouterr().out


class TestComparisons:
    """Test --compare and --unit."""

    def test_compare_selected(self, run):
        code, out = run('--select', 'dept-defense', '--compare')
        assert code == EXIT_OK
        assert "Department of Defense ($895.0B) could fund" in out
        assert "teacher salaries" in out
        assert "Solar Panel Installations" in out

    def test_compare_at_root(self, run):
        code, out = run('--compare')
        assert code == EXIT_OK
        assert "could fund" in out

    def test_unit(self, run):
        code, out = run('--unit', 'teacher-salary')
        assert code == EXIT_OK
        assert "could fund" in out
        assert "teacher salaries" in out

    def test_unknown_unit(self, run):
        code, out = run('--unit', 'nope')
        assert code == EXIT_UNKNOWN_UNIT
        assert "Unknown comparison unit: nope" in out


class TestDataErrors:
    """Test data file failures."""

    def test_missing_tree(self, run, temp_dir):
        code, out = run('--tree', str(temp_dir / 'missing.json'))
        assert code == EXIT_DATA_ERROR
        assert "Data error" in out

    def test_broken_units_only_matter_when_comparing(self, run, data_dir):
        (data_dir / 'units.json').write_text("{", encoding='utf-8')

        assert run()[0] == EXIT_OK
        assert run('--compare')[0] == EXIT_DATA_ERROR


class TestValidate:
    """Test --validate."""

    def test_clean_data(self, run):
        code, out = run('--validate')
        assert code == EXIT_OK
        assert "Budget tree: 4/4 clean, 0 errors, 0 warnings" in out

    def test_errors_fail(self, run, data_dir, sample_unit_records):
        sample_unit_records[0]["cost"] = -1
        (data_dir / 'units.json').write_text(json.dumps(sample_unit_records), encoding='utf-8')

        code, out = run('--validate')
        assert code == EXIT_DATA_ERROR
        assert "Cost must be positive" in out

    def test_tree_the_loader_refuses_fails(self, run, data_dir):
        (data_dir / 'tree.json').write_text("[]", encoding='utf-8')

        code, out = run('--validate')
        assert code == EXIT_DATA_ERROR
        assert "Tree root must be a JSON object" in out
        assert run()[0] == EXIT_DATA_ERROR
