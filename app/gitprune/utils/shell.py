"""Shell execution utilities.

Provides subprocess execution for git commands, both single commands
and ordered batches scoped to a repository working directory.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Result of running an ordered batch of commands.

    Attributes:
        lines: Non-blank stdout lines of the final command in the batch.
        errors: Error lines collected from every failed command.
    """

    lines: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if every command in the batch succeeded."""
        return not self.errors


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
    cwd: str | None = None,
) -> CommandResult:
    """Execute a shell command and return the result.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command.
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable or cwd is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=check,
        timeout=timeout,
        cwd=cwd,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def run_batch(
    commands: list[list[str]],
    cwd: str,
    *,
    timeout: float | None = 300.0,
) -> BatchResult:
    """Run commands in order inside one working directory.

    Every command runs even if an earlier one failed; failures are
    collected rather than raised. Only the final command's output is
    returned, split into lines with blank lines dropped.

    Args:
        commands: Ordered list of argument lists.
        cwd: Working directory (repository path) for every command.
        timeout: Per-command timeout in seconds.

    Returns:
        BatchResult with the last command's lines and all error lines.
    """
    errors: list[str] = []
    last_stdout = ""

    for args in commands:
        display = " ".join(args)
        logger.debug("Running %r in %s", display, cwd)
        try:
            result = run_command(args, timeout=timeout, cwd=cwd)
        except subprocess.TimeoutExpired:
            errors.append(f"{display}: timed out after {timeout}s")
            last_stdout = ""
            continue
        except OSError as e:
            errors.append(f"{display}: {e}")
            last_stdout = ""
            continue

        last_stdout = result.stdout
        if not result.success:
            stderr_lines = [line for line in result.stderr.splitlines() if line.strip()]
            if stderr_lines:
                errors.extend(f"{display}: {line}" for line in stderr_lines)
            else:
                errors.append(f"{display}: exited with code {result.returncode}")

    lines = [line for line in last_stdout.splitlines() if line.strip()]
    return BatchResult(lines=lines, errors=errors)
