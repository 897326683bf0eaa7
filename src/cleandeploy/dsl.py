# dsl.py
from __future__ import annotations

import shlex
from typing import List, Sequence, Union

from .model import Phase, Step


# ---------------------------------------------------------------------
# Step helper
# ---------------------------------------------------------------------

def step(
    name: str,
    cmd: Union[str, Sequence[str]],
    *,
    phase: Phase,
    banner: str,
    cwd: str | None = None,
) -> Step:
    """Create a step. A string command is split like a shell would, but never run through one."""
    argv = shlex.split(cmd) if isinstance(cmd, str) else [str(a) for a in cmd]
    if not argv:
        raise ValueError(f"step({name!r}) must have a command")
    return Step(name=name, phase=phase, argv=tuple(argv), banner=banner, cwd=cwd)


# ---------------------------------------------------------------------
# Workflow helper
# ---------------------------------------------------------------------

def wf(*steps: Step) -> List[Step]:
    """
    Workflow definition helper.

        def workflow():
            return wf(
                step("Clean", "cargo clean", phase=Phase.CLEAN, banner="..."),
                step("Build", "cargo build", phase=Phase.BUILD, banner="..."),
            )

    Phases must appear in strictly increasing order.
    """
    if not steps:
        raise ValueError("Workflow must have at least one step")

    previous: Phase | None = None
    for s in steps:
        if not isinstance(s, Step):
            raise TypeError(f"Workflow entries must be Step, got {type(s).__name__}")
        if previous is not None and s.phase.value <= previous.value:
            raise ValueError(
                f"Step '{s.name}' ({s.phase.name}) is out of order after {previous.name}"
            )
        previous = s.phase

    return list(steps)
