# runner.py
from __future__ import annotations

import signal
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .dsl import wf
from .model import Phase, PipelineRun, Step
from .ui.console import get_console
from .workflow import COMPLETE_BANNER

# Exit statuses a POSIX shell reports when it cannot run a command.
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127
EXIT_SIGNAL_BASE = 128

TOOL_HINTS = {
    "cargo": "Install the Rust toolchain (https://rustup.rs) or fix PATH.",
    "vercel": "Install the Vercel CLI (e.g., npm i -g vercel) or fix PATH.",
}


# ----------------------------------------------------------------------
# Errors
# ----------------------------------------------------------------------

@dataclass
class StepFailure(Exception):
    step: str
    phase: Phase
    cmd: str
    exit_code: int
    hint: Optional[str] = None

    def __str__(self) -> str:
        return f"step '{self.step}' failed (exit={self.exit_code}): {self.cmd}"


def exit_status(returncode: int) -> int:
    """Map a child return code to the status a shell would report for it."""
    if returncode < 0:
        return EXIT_SIGNAL_BASE + (-returncode)
    return returncode


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def run_step(step: Step, project_root: Path) -> None:
    cwd = (project_root / (step.cwd or ".")).resolve()
    if not cwd.is_dir():
        raise FileNotFoundError(f"step '{step.name}' cwd not found: {cwd}")

    console = get_console()
    console.print_debug(f"exec: {step.command} (cwd={cwd})")

    # the banner must reach the terminal before the child writes anything
    sys.stdout.flush()

    try:
        proc = subprocess.run(list(step.argv), cwd=str(cwd), check=False)
    except FileNotFoundError:
        raise StepFailure(
            step=step.name,
            phase=step.phase,
            cmd=step.command,
            exit_code=EXIT_NOT_FOUND,
            hint=TOOL_HINTS.get(step.tool, f"Install {step.tool} or fix PATH."),
        ) from None
    except PermissionError as e:
        if e.filename == str(cwd):
            raise PermissionError(f"step '{step.name}' cwd not accessible: {cwd}") from e
        raise StepFailure(
            step=step.name,
            phase=step.phase,
            cmd=step.command,
            exit_code=EXIT_NOT_EXECUTABLE,
            hint=f"{step.tool} is not executable.",
        ) from None

    if proc.returncode != 0:
        raise StepFailure(
            step=step.name,
            phase=step.phase,
            cmd=step.command,
            exit_code=exit_status(proc.returncode),
        )


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run_pipeline(
    steps: Iterable[Step],
    *,
    project_root: str | Path = ".",
    complete_banner: str = COMPLETE_BANNER,
    run: Optional[PipelineRun] = None,
) -> PipelineRun:
    """
    Run steps one at a time, in order, stopping at the first failure.

    Raises StepFailure for the first failing step; nothing after it runs
    and nothing before it is undone. Returns the finished run on success.
    Pass `run` to observe the state of the run when it raises.
    """
    steps = wf(*steps)
    root = Path(project_root).resolve()
    console = get_console()
    if run is None:
        run = PipelineRun()

    for s in steps:
        run.advance(s.phase)
        console.print_banner(s.banner)
        try:
            run_step(s, root)
        except StepFailure as e:
            run.fail(e.exit_code)
            raise
        except KeyboardInterrupt:
            run.fail(EXIT_SIGNAL_BASE + signal.SIGINT)
            raise
        except BaseException:
            run.fail(1)
            raise

    run.succeed()
    console.print_banner(complete_banner)
    return run
