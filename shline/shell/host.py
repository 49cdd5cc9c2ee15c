"""Run parsed processes and pipelines on the host."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from collections.abc import Mapping

from ..parser import Process
from ..pipeline import Pipe
from .common import CommandResult

LOGGER = logging.getLogger("shline.shell.host")


def _child_env(env: Mapping[str, str] | None) -> dict[str, str] | None:
    return dict(env) if env is not None else None


def _start_failure(exc: OSError) -> CommandResult:
    if isinstance(exc, FileNotFoundError):
        return CommandResult(stderr=str(exc), exit_code=127)
    return CommandResult(stderr=str(exc), exit_code=getattr(exc, "errno", None) or 1)


def run_process(
    process: Process,
    *,
    capture: bool = False,
    env: Mapping[str, str] | None = None,
) -> CommandResult:
    """Start ``process`` and wait for it.

    With ``capture`` the child's output is collected into the result,
    otherwise it inherits this process's streams.
    """

    LOGGER.debug("spawning %r", process.argv)
    try:
        completed = subprocess.run(
            process.argv,
            capture_output=capture,
            text=True,
            check=False,
            env=_child_env(env),
        )
    except OSError as exc:
        LOGGER.debug("failed to start %s: %s", process.path, exc)
        return _start_failure(exc)
    return CommandResult(
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
        exit_code=completed.returncode,
        spawned=True,
    )


def run_pipe(
    pipe: Pipe,
    *,
    capture: bool = False,
    env: Mapping[str, str] | None = None,
) -> CommandResult:
    """Run both stages with the producer's stdout wired to the consumer's stdin.

    The result carries the consumer's exit code.
    """

    child_env = _child_env(env)
    output = subprocess.PIPE if capture else None
    LOGGER.debug("spawning pipeline %r | %r", pipe.producer.argv, pipe.consumer.argv)
    with tempfile.TemporaryFile(mode="w+") as producer_err:
        try:
            producer = subprocess.Popen(
                pipe.producer.argv,
                stdout=subprocess.PIPE,
                stderr=producer_err if capture else None,
                env=child_env,
            )
        except OSError as exc:
            return _start_failure(exc)
        try:
            consumer = subprocess.Popen(
                pipe.consumer.argv,
                stdin=producer.stdout,
                stdout=output,
                stderr=output,
                text=True,
                env=child_env,
            )
        except OSError as exc:
            producer.kill()
            producer.wait()
            return _start_failure(exc)
        finally:
            # the consumer owns the read end now
            assert producer.stdout is not None
            producer.stdout.close()
        stdout, stderr = consumer.communicate()
        producer.wait()
        producer_err.seek(0)
        errors = producer_err.read() + (stderr or "")
    return CommandResult(
        stdout=stdout or "",
        stderr=errors,
        exit_code=consumer.returncode,
        spawned=True,
    )


__all__ = ["run_pipe", "run_process"]
