"""
Tests for the engine under PRI (non-preemptive priority).

Lower priority NUMBER runs first. Ties are broken by arrival time.
"""

from models.enums import SchedulingPolicy
from scheduler.engine import SchedulerEngine


def test_urgent_arrival_does_not_preempt():
    engine = SchedulerEngine(1, SchedulingPolicy.PRI)
    assert engine.new_job(0, 0, 10, 5) == 0
    assert engine.new_job(1, 1, 10, 1) is None
    assert engine.running_jobs()[0].job_id == 0


def test_highest_priority_waiting_job_runs_next():
    engine = SchedulerEngine(1, SchedulingPolicy.PRI)
    engine.new_job(0, 0, 4, 5)
    engine.new_job(1, 1, 4, 8)     # report
    engine.new_job(2, 2, 4, 1)     # payment
    engine.new_job(3, 3, 4, 2)     # alert

    assert engine.job_finished(0, 0, 4) == 2
    assert engine.job_finished(0, 2, 8) == 3
    assert engine.job_finished(0, 3, 12) == 1


def test_equal_priority_preserves_arrival_order():
    engine = SchedulerEngine(1, SchedulingPolicy.PRI)
    engine.new_job(0, 0, 4, 5)
    engine.new_job(1, 1, 4, 3)
    engine.new_job(2, 2, 4, 3)

    assert engine.job_finished(0, 0, 4) == 1
    assert engine.job_finished(0, 1, 8) == 2
