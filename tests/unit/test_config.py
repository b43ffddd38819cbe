"""Unit tests for configuration lookup."""

import pytest

from delta.core.config import Config, get_config


@pytest.fixture
def config(repo):
    return Config(repo.config_file)


@pytest.fixture
def global_config_file(isolated_config):
    return isolated_config / '.deltaconfig'


def test_fallback_when_unset(config):
    """Test missing keys return the fallback."""
    assert config.get('user', 'name') is None
    assert config.get('user', 'name', fallback='nobody') == 'nobody'


def test_reads_repo_config(config):
    """Test values written by init are readable."""
    assert config.get('core', 'repositoryformatversion') == '0'


def test_reads_global_config(repo, global_config_file, write_config):
    """Test the global file is used when the repository has no value."""
    write_config(global_config_file, 'user', email='global@example.com')
    assert Config(repo.config_file).get('user', 'email') == 'global@example.com'


def test_repo_overrides_global(repo, global_config_file, write_config):
    """Test repository values win over global ones."""
    write_config(global_config_file, 'user', name='Global')
    write_config(repo.config_file, 'user', name='Local')

    assert Config(repo.config_file).get('user', 'name') == 'Local'
    assert Config().get('user', 'name') == 'Global'


def test_environment_overrides_files(repo, monkeypatch, write_config):
    """Test DELTA_<SECTION>_<KEY> wins over both files."""
    write_config(repo.config_file, 'user', name='Local')
    monkeypatch.setenv('DELTA_USER_NAME', 'From Env')

    assert Config(repo.config_file).get('user', 'name') == 'From Env'


def test_files_parsed_once(repo, config, write_config):
    """Test a Config keeps the values it first read."""
    assert config.get('user', 'name') is None
    write_config(repo.config_file, 'user', name='Later')

    assert config.get('user', 'name') is None
    assert Config(repo.config_file).get('user', 'name') == 'Later'


def test_author_identity_from_env(config, author_env):
    """Test DELTA_AUTHOR_* supply the commit identity."""
    assert config.get_author_identity() == ('Test User', 'test@example.com')
    assert config.author_line() == author_env


def test_author_identity_from_config(repo, write_config):
    """Test the [user] section supplies the commit identity."""
    write_config(repo.config_file, 'user', name='Config User', email='config@example.com')
    assert Config(repo.config_file).author_line() == 'Config User <config@example.com>'


def test_author_env_beats_config(repo, monkeypatch, write_config):
    """Test author variables override the config file."""
    write_config(repo.config_file, 'user', name='Config User')
    monkeypatch.setenv('DELTA_AUTHOR_NAME', 'Env User')

    assert Config(repo.config_file).get_author_identity()[0] == 'Env User'


def test_author_line_missing_values(config):
    """Test unset name and email appear as None."""
    assert config.get_author_identity() == (None, None)
    assert config.author_line() == 'None <None>'


def test_get_config(repo):
    """Test get_config binds to the repository when given one."""
    assert get_config(repo).repo_config_path == repo.config_file
    assert get_config().repo_config_path is None
