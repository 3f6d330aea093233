"""Execution engine package."""

from proccall.execution.drain import DrainWorker, read_to_end
from proccall.execution.engine import ProcessOutcome, classify, run_process

__all__ = ["DrainWorker", "ProcessOutcome", "classify", "read_to_end", "run_process"]
