"""
Stage Logger for the fridge recipe pipeline

Structured logfire events for each assembler stage (cache lookup,
generation, region resolution, pricing) with timing and error tracking.
"""

import logfire
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
import time


@dataclass
class StageMetrics:
    """Metrics collected for each stage."""
    stage_name: str
    start_time: float
    end_time: Optional[float] = None
    duration: Optional[float] = None
    status: str = "in_progress"
    metrics: Dict[str, Any] = field(default_factory=dict)
    errors: List[Dict[str, str]] = field(default_factory=list)

    def complete(self, status: str = "success", **metrics):
        """Mark stage as complete with metrics."""
        self.end_time = time.time()
        self.duration = self.end_time - self.start_time
        self.status = status
        self.metrics.update(metrics)

    def add_error(self, error_type: str, message: str):
        """Add an error to this stage."""
        self.errors.append({"type": error_type, "message": message[:200]})


class PipelineStageLogger:
    """
    Tracks one assemble() call.

    Usage:
        stages = PipelineStageLogger(cache_key)
        stages.start_stage("generation")
        # ... do work ...
        stages.complete_stage("generation", draft_count=3)
        stages.log_pipeline_summary(total_recipes=3)
    """

    def __init__(self, cache_key: str):
        self.cache_key = cache_key
        self.stages: Dict[str, StageMetrics] = {}
        self.pipeline_start = time.time()

    def start_stage(self, stage_name: str) -> StageMetrics:
        """Start tracking a stage."""
        stage = StageMetrics(stage_name=stage_name, start_time=time.time())
        self.stages[stage_name] = stage
        logfire.debug("recipe_stage_started", stage_name=stage_name, cache_key=self.cache_key)
        return stage

    def complete_stage(self, stage_name: str, status: str = "success", **metrics):
        """Complete a stage with metrics."""
        stage = self.stages.get(stage_name)
        if stage is None:
            return
        stage.complete(status, **metrics)
        logfire.info("recipe_stage_completed",
                     stage_name=stage_name,
                     duration=stage.duration,
                     status=status,
                     metrics=metrics,
                     errors=stage.errors,
                     cache_key=self.cache_key)

    def add_stage_error(self, stage_name: str, error_type: str, message: str):
        """Add an error to a stage."""
        if stage_name in self.stages:
            self.stages[stage_name].add_error(error_type, message)

    def log_pipeline_summary(self, total_recipes: int = 0, cache_hit: bool = False) -> Dict[str, Any]:
        """Log the request summary and return it."""
        total_duration = time.time() - self.pipeline_start
        stage_timings = {name: stage.duration or 0 for name, stage in self.stages.items()}
        total_errors = [error for stage in self.stages.values() for error in stage.errors]

        logfire.info("recipe_pipeline_summary",
                     cache_key=self.cache_key,
                     total_duration=total_duration,
                     total_recipes=total_recipes,
                     cache_hit=cache_hit,
                     stage_timings=stage_timings,
                     total_errors=len(total_errors),
                     errors=total_errors[:5])

        return {
            "total_duration": total_duration,
            "total_recipes": total_recipes,
            "cache_hit": cache_hit,
            "stage_timings": stage_timings,
            "error_count": len(total_errors)
        }
