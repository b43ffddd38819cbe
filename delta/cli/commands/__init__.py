"""CLI commands for Delta."""

from delta.cli.commands.init import init_cmd
from delta.cli.commands.add import add_cmd
from delta.cli.commands.commit import commit_cmd
from delta.cli.commands.branch import branch_cmd, checkout_cmd
from delta.cli.commands.diff import diff_cmd
from delta.cli.commands.tracked import tracked_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'branch_cmd', 'checkout_cmd',
           'diff_cmd', 'tracked_cmd']
