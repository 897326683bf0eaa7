from .dsl import step, wf
from .runner import StepFailure, run_pipeline
from .model import Phase, PipelineRun, Status, Step
from .workflow import workflow

__all__ = ["step", "wf", "StepFailure", "run_pipeline", "Phase", "PipelineRun", "Status", "Step", "workflow"]
