"""
Tests for the preemptive policies, PSJF and PPRI.

When every core is busy, an arrival that ranks within the first `cores`
positions evicts the running job with the worst key: the largest remaining
time under PSJF, the largest priority number under PPRI. It only does so
if that key is strictly worse than the newcomer's. Ties between victims
go to the lowest core index.
"""

from models.enums import SchedulingPolicy
from scheduler.engine import SchedulerEngine


def _job(engine: SchedulerEngine, job_id: int):
    return next(job for job in engine.live_jobs() if job.job_id == job_id)


# ── PSJF ────────────────────────────────────────────────────────


def test_psjf_shorter_arrival_preempts(check_partition):
    engine = SchedulerEngine(1, SchedulingPolicy.PSJF)
    assert engine.new_job(0, 0, 10, 0) == 0
    assert engine.new_job(1, 2, 3, 0) == 0

    evicted = _job(engine, 0)
    assert evicted.remaining_time == 8
    assert evicted.core_number is None
    assert evicted.first_start_time == 0
    assert engine.running_jobs()[0].job_id == 1
    check_partition(engine)


def test_psjf_evicted_job_resumes_after_preemptor_finishes():
    engine = SchedulerEngine(1, SchedulingPolicy.PSJF)
    engine.new_job(0, 0, 10, 0)
    engine.new_job(1, 2, 3, 0)

    assert engine.job_finished(0, 1, 5) == 0
    assert engine.job_finished(0, 0, 13) is None

    assert engine.average_waiting_time() == 1.5      # (3 + 0) / 2
    assert engine.average_turnaround_time() == 8.0   # (13 + 3) / 2
    assert engine.average_response_time() == 0.0


def test_psjf_equal_remaining_time_does_not_preempt():
    engine = SchedulerEngine(1, SchedulingPolicy.PSJF)
    engine.new_job(0, 0, 10, 0)

    assert engine.new_job(1, 2, 8, 0) is None
    assert engine.running_jobs()[0].job_id == 0


def test_psjf_evicts_job_with_most_remaining_time():
    engine = SchedulerEngine(2, SchedulingPolicy.PSJF)
    engine.new_job(0, 0, 10, 0)      # remaining 8 at t=2
    engine.new_job(1, 1, 10, 0)      # remaining 9 at t=2

    assert engine.new_job(2, 2, 5, 0) == 1
    assert _job(engine, 1).core_number is None
    assert _job(engine, 0).remaining_time == 8
    assert _job(engine, 1).remaining_time == 9


def test_psjf_tie_between_victims_goes_to_lowest_core():
    engine = SchedulerEngine(2, SchedulingPolicy.PSJF)
    engine.new_job(0, 0, 10, 0)
    engine.new_job(1, 0, 10, 0)

    assert engine.new_job(2, 3, 2, 0) == 0


def test_psjf_preempted_at_its_own_start_loses_first_start_time():
    """A job evicted at the very tick it started has not really run yet."""
    engine = SchedulerEngine(1, SchedulingPolicy.PSJF)
    engine.new_job(0, 0, 10, 0)
    assert engine.new_job(1, 0, 3, 0) == 0

    assert _job(engine, 0).first_start_time is None

    assert engine.job_finished(0, 1, 3) == 0
    assert _job(engine, 0).first_start_time == 3

    engine.job_finished(0, 0, 13)
    assert engine.average_response_time() == 1.5     # (3 + 0) / 2


def test_psjf_waiting_jobs_keep_their_remaining_time():
    engine = SchedulerEngine(1, SchedulingPolicy.PSJF)
    engine.new_job(0, 0, 10, 0)
    engine.new_job(1, 2, 3, 0)       # job 0 evicted with 8 left
    engine.new_job(2, 4, 20, 0)      # only the running job is charged

    assert _job(engine, 0).remaining_time == 8
    assert _job(engine, 1).remaining_time == 1


# ── PPRI ────────────────────────────────────────────────────────


def test_ppri_more_important_arrival_preempts(check_partition):
    engine = SchedulerEngine(1, SchedulingPolicy.PPRI)
    assert engine.new_job(0, 0, 10, 3) == 0
    assert engine.new_job(1, 1, 10, 1) == 0

    assert _job(engine, 0).core_number is None
    assert _job(engine, 0).first_start_time == 0
    check_partition(engine)


def test_ppri_equal_priority_does_not_preempt():
    engine = SchedulerEngine(1, SchedulingPolicy.PPRI)
    engine.new_job(0, 0, 10, 2)
    assert engine.new_job(1, 1, 10, 2) is None


def test_ppri_evicts_least_important_job():
    engine = SchedulerEngine(2, SchedulingPolicy.PPRI)
    engine.new_job(0, 0, 10, 2)
    engine.new_job(1, 1, 10, 5)

    assert engine.new_job(2, 2, 10, 1) == 1


def test_ppri_tie_between_victims_goes_to_lowest_core():
    engine = SchedulerEngine(2, SchedulingPolicy.PPRI)
    engine.new_job(0, 0, 10, 4)
    engine.new_job(1, 1, 10, 4)

    assert engine.new_job(2, 2, 10, 1) == 0


def test_ppri_arrival_ranked_beyond_cores_waits():
    engine = SchedulerEngine(2, SchedulingPolicy.PPRI)
    engine.new_job(0, 0, 10, 1)
    engine.new_job(1, 1, 10, 2)

    assert engine.new_job(2, 2, 10, 3) is None


def test_ppri_evicted_job_resumes_in_priority_order():
    engine = SchedulerEngine(1, SchedulingPolicy.PPRI)
    engine.new_job(0, 0, 10, 3)
    engine.new_job(1, 1, 3, 1)       # preempts job 0
    engine.new_job(2, 2, 5, 3)       # same priority as job 0, arrived later

    assert engine.job_finished(0, 1, 4) == 0
    assert engine.job_finished(0, 0, 13) == 2
