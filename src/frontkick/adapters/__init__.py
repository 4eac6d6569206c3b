"""Concrete adapters (I/O): subprocesses, git config, GitHub API, terminal prompts.

Each module implements one contract from `frontkick.core.interfaces`.
"""

from frontkick.adapters.git_config_store import GitConfigCredentialStore
from frontkick.adapters.github import GitHubHost
from frontkick.adapters.process_runner import SubprocessRunner
from frontkick.adapters.prompts import TerminalPrompter

__all__ = [
	"GitConfigCredentialStore",
	"GitHubHost",
	"SubprocessRunner",
	"TerminalPrompter",
]
