"""Synchronous external command execution with merged output capture."""

import shlex
import subprocess

from certificate_generator.lib.logging_config import LOGGER


class CommandError(RuntimeError):
    """External command failed to start or exited non-zero."""

    def __init__(
        self, description: str, argv: list[str], returncode: int | None, output: str
    ) -> None:
        super().__init__(output)
        self.description = description
        self.argv = argv
        self.returncode = returncode
        self.output = output


class CommandRunner:
    """Runs external programs from argument lists, never through a shell."""

    def run(self, description: str, executable: str, *args: str) -> str:
        """Echo and run one command, blocking until it exits.

        Args:
            description: Human-readable step name printed before the command
            executable: Program name or path
            *args: Program arguments, passed through as separate argv entries

        Returns:
            Combined stdout and stderr of the process

        Raises:
            CommandError: If the process cannot be started or exits non-zero
        """
        argv = [executable, *args]

        print()
        print(f"# {description}")
        print(f"-> {shlex.join(argv)}")

        try:
            completed = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as e:
            raise CommandError(description, argv, None, str(e)) from e

        if completed.returncode != 0:
            raise CommandError(description, argv, completed.returncode, completed.stdout)

        LOGGER.debug(
            "%s finished: %s",
            description,
            completed.stdout.strip(),
            extra={"command": shlex.join(argv), "returncode": completed.returncode},
        )
        return completed.stdout
