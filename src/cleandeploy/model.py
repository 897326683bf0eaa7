# model.py
from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Phase(Enum):
    """The three ordered phases of a clean deploy."""
    CLEAN = 1
    BUILD = 2
    DEPLOY = 3


class Status(Enum):
    PENDING = "pending"
    CLEAN = "clean"
    BUILD = "build"
    DEPLOY = "deploy"
    SUCCESS = "success"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (Status.SUCCESS, Status.FAILED)


_PHASE_STATUS = {
    Phase.CLEAN: Status.CLEAN,
    Phase.BUILD: Status.BUILD,
    Phase.DEPLOY: Status.DEPLOY,
}


@dataclass(frozen=True)
class Step:
    """A single external command (step) of the pipeline."""
    name: str
    phase: Phase
    argv: tuple[str, ...]
    banner: str
    cwd: str | None = None

    @property
    def tool(self) -> str:
        return self.argv[0]

    @property
    def command(self) -> str:
        return shlex.join(self.argv)


@dataclass
class PipelineRun:
    """
    State of one pipeline execution.

    PENDING -> CLEAN -> BUILD -> DEPLOY -> SUCCESS
    any non-terminal state -> FAILED
    """
    status: Status = Status.PENDING
    history: List[Phase] = field(default_factory=list)
    exit_code: Optional[int] = None
    failed_phase: Optional[Phase] = None

    def advance(self, phase: Phase) -> None:
        if self.status.terminal:
            raise ValueError(f"Run already finished ({self.status.value}), cannot enter {phase.name}")
        if self.history and phase.value <= self.history[-1].value:
            raise ValueError(
                f"Phase {phase.name} cannot follow {self.history[-1].name}"
            )
        self.history.append(phase)
        self.status = _PHASE_STATUS[phase]

    def succeed(self) -> None:
        if self.status.terminal or not self.history:
            raise ValueError(f"Cannot succeed from state {self.status.value}")
        self.status = Status.SUCCESS
        self.exit_code = 0

    def fail(self, exit_code: int) -> None:
        if self.status.terminal:
            raise ValueError(f"Run already finished ({self.status.value})")
        self.failed_phase = self.history[-1] if self.history else None
        self.status = Status.FAILED
        self.exit_code = exit_code

    @property
    def ok(self) -> bool:
        return self.status is Status.SUCCESS
