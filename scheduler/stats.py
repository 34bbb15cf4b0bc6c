"""
Running statistics for one simulation run.

Per finished job:
    waiting    = completion − arrival − running_time
    response   = first start − arrival
    turnaround = completion − arrival

Only the sums and a count are kept; jobs are dropped as soon as they finish.
"""

from dataclasses import dataclass

from scheduler.base import Job


@dataclass
class SchedulerStats:
    total_waiting_time: float = 0.0
    total_response_time: float = 0.0
    total_turnaround_time: float = 0.0
    total_finished_jobs: int = 0

    def record(self, job: Job, time: int) -> None:
        """Fold a job that completed at `time` into the sums."""
        self.total_waiting_time += time - job.arrival_time - job.running_time
        self.total_response_time += job.first_start_time - job.arrival_time
        self.total_turnaround_time += time - job.arrival_time
        self.total_finished_jobs += 1

    def reset(self) -> None:
        self.total_waiting_time = 0.0
        self.total_response_time = 0.0
        self.total_turnaround_time = 0.0
        self.total_finished_jobs = 0

    def _average(self, total: float) -> float:
        if self.total_finished_jobs == 0:
            return 0.0
        return total / self.total_finished_jobs

    def average_waiting(self) -> float:
        return self._average(self.total_waiting_time)

    def average_turnaround(self) -> float:
        return self._average(self.total_turnaround_time)

    def average_response(self) -> float:
        return self._average(self.total_response_time)

    def as_dict(self) -> dict:
        return {
            "finished_jobs": self.total_finished_jobs,
            "average_waiting_time": self.average_waiting(),
            "average_turnaround_time": self.average_turnaround(),
            "average_response_time": self.average_response(),
        }
