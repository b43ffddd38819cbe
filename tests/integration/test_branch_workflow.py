"""Integration tests for branch and checkout workflow."""

import pytest
from click.testing import CliRunner

from delta.cli.main import cli


@pytest.fixture
def runner(repo, monkeypatch):
    monkeypatch.chdir(repo.work_tree)
    return CliRunner()


@pytest.fixture
def committed(repo, runner, working_files, author_env):
    """Repository with one commit on main."""
    runner.invoke(cli, ['add', '.'])
    runner.invoke(cli, ['commit', 'Initial commit'])
    return repo.refs.current_commit()


class TestBranchCommand:
    """Tests for delta branch command."""

    def test_list_branches_fresh_repo(self, runner):
        """Test main is not listed before it has a ref file."""
        result = runner.invoke(cli, ['branch'])
        assert result.exit_code == 0
        assert result.output == ''

    def test_create_branch(self, repo, runner, committed):
        """Test a new branch starts at the current commit."""
        result = runner.invoke(cli, ['branch', 'feature'])

        assert result.exit_code == 0
        assert "Created branch 'feature'" in result.output
        assert (repo.heads_dir / 'feature').read_text() == committed

    def test_list_marks_current(self, runner, committed):
        runner.invoke(cli, ['branch', 'feature'])
        result = runner.invoke(cli, ['branch'])

        assert result.output.splitlines() == ['  feature', '* main']

    def test_create_existing_branch(self, runner, committed):
        """Test creating a duplicate branch fails."""
        runner.invoke(cli, ['branch', 'feature'])
        result = runner.invoke(cli, ['branch', 'feature'])

        assert result.exit_code != 0
        assert "Branch 'feature' already exists" in result.output

    def test_branch_before_first_commit(self, repo, runner):
        """Test a branch created before any commit is empty."""
        result = runner.invoke(cli, ['branch', 'early'])

        assert result.exit_code == 0
        assert (repo.heads_dir / 'early').read_text() == ''


class TestCheckoutCommand:
    """Tests for delta checkout command."""

    def test_checkout_branch(self, repo, runner, committed):
        """Test checkout moves HEAD only."""
        runner.invoke(cli, ['branch', 'feature'])
        result = runner.invoke(cli, ['checkout', 'feature'])

        assert result.exit_code == 0
        assert "Switched to branch 'feature'" in result.output
        assert f'HEAD is now at {committed[:7]}' in result.output
        assert repo.head_file.read_text() == 'refs/heads/feature'

    def test_checkout_missing_branch(self, repo, runner):
        """Test checkout of an unknown branch leaves HEAD alone."""
        result = runner.invoke(cli, ['checkout', 'nope'])

        assert result.exit_code != 0
        assert 'Branch with specified name does not exist!' in result.output
        assert repo.head_file.read_text() == 'refs/heads/main'

    def test_commits_follow_checked_out_branch(self, repo, runner, committed, make_file):
        """Test new commits land on the checked-out branch only."""
        runner.invoke(cli, ['branch', 'feature'])
        runner.invoke(cli, ['checkout', 'feature'])

        make_file('feature.txt', 'new\n')
        runner.invoke(cli, ['add', 'feature.txt'])
        runner.invoke(cli, ['commit', 'Feature work'])

        feature_tip = (repo.heads_dir / 'feature').read_text()
        assert (repo.heads_dir / 'main').read_text() == committed
        assert feature_tip != committed
        assert repo.store.read_object(feature_tip).parent == committed

        runner.invoke(cli, ['checkout', 'main'])
        assert repo.refs.current_commit() == committed
