"""
Workload models: the jobs a simulation run replays.

A workload file is JSON:

    {
      "jobs": [
        {"job_id": 0, "arrival_time": 0, "running_time": 8, "priority": 1},
        {"job_id": 1, "arrival_time": 1, "running_time": 4, "priority": 2}
      ]
    }

Pydantic validates it on the way in, so the driver never has to deal with
a zero-length job or a duplicate id.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class JobSpec(BaseModel):
    """One job as the driver sees it: when it shows up and how much work it needs."""

    job_id: int = Field(..., ge=0)
    arrival_time: int = Field(..., ge=0, description="Simulated tick the job arrives at")
    running_time: int = Field(..., gt=0, description="Ticks of service the job needs")
    priority: int = Field(default=0, description="Lower number = more important")


class Workload(BaseModel):
    jobs: list[JobSpec] = Field(default_factory=list)

    @field_validator("jobs")
    @classmethod
    def _unique_ids(cls, jobs: list[JobSpec]) -> list[JobSpec]:
        seen: set[int] = set()
        for job in jobs:
            if job.job_id in seen:
                raise ValueError(f"Duplicate job_id: {job.job_id}")
            seen.add(job.job_id)
        return jobs


def load_workload(path: str | Path) -> Workload:
    """Read and validate a workload JSON file."""
    return Workload.model_validate_json(Path(path).read_text(encoding="utf-8"))
