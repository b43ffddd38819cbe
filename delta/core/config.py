"""Configuration lookup for Delta.

Values come from INI files: the repository's ``.delta/config`` first, then
the user's ``~/.deltaconfig``. ``DELTA_<SECTION>_<KEY>`` environment
variables override both.
"""

import os
import configparser
from pathlib import Path
from typing import List, Optional, Tuple


def _read_ini(path: Optional[Path]) -> configparser.ConfigParser:
    parser = configparser.ConfigParser()
    if path is not None and path.exists():
        parser.read(path)
    return parser


class Config:
    """
    Read-only view over the repository and global config files.

    Files are parsed once, on first lookup.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.deltaconfig'

    def __init__(self, repo_config_path: Optional[Path] = None, global_config_path: Optional[Path] = None):
        self.repo_config_path = repo_config_path
        self.global_config_path = global_config_path or self.GLOBAL_CONFIG_PATH
        self._layers: Optional[List[configparser.ConfigParser]] = None

    @property
    def layers(self) -> List[configparser.ConfigParser]:
        """Parsed config files, highest precedence first."""
        if self._layers is None:
            self._layers = [_read_ini(self.repo_config_path), _read_ini(self.global_config_path)]
        return self._layers

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Look up ``[section] key``.

        The environment variable ``DELTA_<SECTION>_<KEY>`` wins, then the
        repository file, then the global file, then ``fallback``.
        """
        env_value = os.environ.get(f"DELTA_{section.upper()}_{key.upper()}")
        if env_value is not None:
            return env_value

        for layer in self.layers:
            if layer.has_option(section, key):
                return layer.get(section, key)
        return fallback

    def get_author_identity(self) -> Tuple[Optional[str], Optional[str]]:
        """
        Name and email recorded in commits.

        ``DELTA_AUTHOR_NAME`` / ``DELTA_AUTHOR_EMAIL`` take precedence over
        ``[user] name`` / ``[user] email``. Either value may be None.
        """
        name = os.environ.get('DELTA_AUTHOR_NAME') or self.get('user', 'name')
        email = os.environ.get('DELTA_AUTHOR_EMAIL') or self.get('user', 'email')
        return name, email

    def author_line(self) -> str:
        """Author as ``Name <email>``; missing parts are rendered verbatim."""
        name, email = self.get_author_identity()
        return f"{name} <{email}>"


def get_config(repo=None) -> Config:
    """Config bound to ``repo``, or global-only when no repository is given."""
    if repo:
        return Config(repo.config_file)
    return Config()
