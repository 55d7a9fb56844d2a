"""SVN Client - Thin wrapper around the `svn` command-line client."""

import subprocess
from pathlib import Path

from svnmerge import DEFAULT_LOG_LIMIT
from svnmerge.output import dim, print_success, print_warning
from svnmerge.svn.log_parser import Revision, parse_log


class SvnError(Exception):
    """Raised when svn operations fail."""
    pass


class SvnClient:
    """Runs svn commands against local working copies and repository URLs."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def _echo(self, args: tuple[str, ...], cwd: str | None) -> None:
        if self.verbose:
            where = f" (in {cwd})" if cwd else ""
            print(dim(f"$ svn {' '.join(args)}{where}"))

    def _require_dir(self, path: str) -> None:
        """Fail fast if a working copy directory is missing."""
        if not path or not Path(path).is_dir():
            raise SvnError(f"Failed to change to directory {path or '(empty)'}: no such directory")

    def _run_svn(self, *args: str, cwd: str | None = None) -> str:
        """Run an svn command and return stdout."""
        self._echo(args, cwd)
        try:
            result = subprocess.run(
                ['svn', *args],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise SvnError(f"svn {args[0]} failed: exit status {e.returncode}\n{e.stderr.strip()}")
        except FileNotFoundError:
            raise SvnError("svn is not installed or not in PATH")

    def _stream_svn(self, *args: str, cwd: str | None = None) -> None:
        """Run an svn command with its output going straight to the terminal."""
        self._echo(args, cwd)
        try:
            subprocess.run(['svn', *args], cwd=cwd, check=True)
        except subprocess.CalledProcessError as e:
            raise SvnError(f"svn {args[0]} failed: exit status {e.returncode}")
        except FileNotFoundError:
            raise SvnError("svn is not installed or not in PATH")

    def update(self, path: str) -> None:
        print(f"Updating local repo at: {path}")
        try:
            self._stream_svn('update', path)
        except SvnError as e:
            raise SvnError(f"Update failed: {e}")
        print_success("Update successful")

    def try_update(self, path: str) -> bool:
        """Update before a read-only operation; failures only warn."""
        try:
            self.update(path)
            return True
        except SvnError as e:
            print_warning(f"Failed to update local repo: {e}")
            return False

    def log(self, path: str, limit: int = DEFAULT_LOG_LIMIT) -> str:
        """Raw `svn log` text for the working copy at path."""
        self._require_dir(path)
        return self._run_svn('log', '-l', str(limit), cwd=path)

    def recent_revisions(self, path: str, limit: int = DEFAULT_LOG_LIMIT) -> list[Revision]:
        """Refresh the working copy, then fetch and parse its latest log entries."""
        self.try_update(path)
        return parse_log(self.log(path, limit))

    def log_verbose(self, path: str, limit: int = DEFAULT_LOG_LIMIT) -> None:
        self._require_dir(path)
        self._stream_svn('log', '-l', str(limit), '--verbose', cwd=path)

    def log_remote(self, url: str, limit: int = DEFAULT_LOG_LIMIT) -> None:
        self._stream_svn('log', '-l', str(limit), '--verbose', url)

    def merge(self, target_dir: str, source_url: str) -> None:
        self._require_dir(target_dir)
        self._stream_svn('merge', source_url, cwd=target_dir)

    def status(self, path: str) -> bool:
        """Show working copy status; a failure here never aborts a merge."""
        try:
            self._require_dir(path)
            self._stream_svn('status', cwd=path)
            return True
        except SvnError as e:
            print_warning(f"Could not show status: {e}")
            return False

    def commit(self, target_dir: str, message: str) -> None:
        self._require_dir(target_dir)
        self._stream_svn('commit', '-m', message, cwd=target_dir)
