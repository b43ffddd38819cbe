"""Integration tests for diff command."""

import pytest
from click.testing import CliRunner

from delta.cli.main import cli


@pytest.fixture
def staged_repo(repo, make_file, monkeypatch):
    """Repository with one staged three-line file."""
    make_file('notes.txt', 'a\nb\nc\n')
    monkeypatch.chdir(repo.work_tree)
    CliRunner().invoke(cli, ['add', 'notes.txt'])
    return repo


class TestDiffCommand:
    """Tests for delta diff command."""

    def test_diff_no_changes(self, staged_repo):
        """Test an untouched file reports nothing to show."""
        result = CliRunner().invoke(cli, ['diff', 'notes.txt'])

        assert result.exit_code == 0
        assert 'No changes to display' in result.output

    def test_diff_modified_line(self, staged_repo, make_file):
        """Test a replaced line is shown as a removal then an addition."""
        make_file('notes.txt', 'a\nx\nc\n')
        result = CliRunner().invoke(cli, ['diff', 'notes.txt', '--no-color'])

        assert result.exit_code == 0
        assert result.output.splitlines() == ['  a', '- b', '+ x', '  c']

    def test_diff_appended_lines(self, staged_repo, make_file):
        make_file('notes.txt', 'a\nb\nc\nd\n')
        result = CliRunner().invoke(cli, ['diff', 'notes.txt', '--no-color'])

        assert result.output.splitlines() == ['  a', '  b', '  c', '+ d']

    def test_diff_from_subdirectory(self, repo, make_file, monkeypatch):
        """Test paths are resolved against the current directory."""
        make_file('src/app.py', 'one\n')
        monkeypatch.chdir(repo.work_tree)
        CliRunner().invoke(cli, ['add', 'src'])
        make_file('src/app.py', 'two\n')

        monkeypatch.chdir(repo.work_tree / 'src')
        result = CliRunner().invoke(cli, ['diff', 'app.py', '--no-color'])

        assert result.exit_code == 0
        assert result.output.splitlines() == ['+ two', '- one']

    def test_diff_restaged_file(self, staged_repo, make_file):
        """Test diff compares against the most recently staged version."""
        make_file('notes.txt', 'a\nx\nc\n')
        CliRunner().invoke(cli, ['add', 'notes.txt'])

        result = CliRunner().invoke(cli, ['diff', 'notes.txt'])
        assert 'No changes to display' in result.output

    def test_diff_untracked_file(self, staged_repo, make_file):
        """Test diffing a file that was never staged."""
        make_file('other.txt', 'x\n')
        result = CliRunner().invoke(cli, ['diff', 'other.txt'])

        assert result.exit_code != 0
        assert 'Path is not tracked: other.txt' in result.output

    def test_diff_deleted_working_file(self, staged_repo):
        """Test a staged file missing from the work tree is an error."""
        (staged_repo.work_tree / 'notes.txt').unlink()
        result = CliRunner().invoke(cli, ['diff', 'notes.txt'])

        assert result.exit_code != 0
        assert 'Diff failed' in result.output
