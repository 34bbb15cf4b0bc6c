"""
Ordered job queue: every live job, kept sorted by the active policy.

Unlike the FIFO deque and the heap a plain dispatcher would use, this queue
has to answer two extra questions for the engine:

1. "At what rank did the new job land?"
   If it landed at rank >= cores it cannot possibly run now, so the engine
   can stop early without looking at the cores at all.
2. "What is the first job (in rank order) that is not on a core?"
   Running jobs stay in the queue, so the engine scans by position.

A heap can't answer either cheaply, so this is a plain Python list kept
in sorted order:
- insert:     linear scan + list.insert → O(n)
- at / peek:  list indexing            → O(1)
- remove_at:  list.pop(rank)           → O(n)

Workloads are small (tens to thousands of jobs), so clarity wins.

Insertion skips every existing job that ranks strictly ahead of the new one.
All comparators break key ties by arrival time, so equal keys still come out
in arrival order. For FCFS and Round Robin the comparator never reports a
swap, so every insert lands at the back, which is exactly the requeue
behavior Round Robin needs.
"""

from typing import Iterator, Optional

from scheduler.base import Comparator, Job


class OrderedJobQueue:

    def __init__(self, comparator: Comparator):
        self._comparator = comparator
        self._jobs: list[Job] = []

    def insert(self, job: Job) -> int:
        """
        Add a job in policy order and return the zero-based rank it landed at.

        Walks from the front while the existing job still ranks strictly
        ahead (comparator < 0) and inserts before the first one that doesn't.
        """
        rank = 0
        while rank < len(self._jobs) and self._comparator(self._jobs[rank], job) < 0:
            rank += 1
        self._jobs.insert(rank, job)
        return rank

    def peek(self) -> Optional[Job]:
        return self._jobs[0] if self._jobs else None

    def take_front(self) -> Optional[Job]:
        return self._jobs.pop(0) if self._jobs else None

    def at(self, rank: int) -> Optional[Job]:
        if 0 <= rank < len(self._jobs):
            return self._jobs[rank]
        return None

    def remove_matching(self, job: Job) -> int:
        """
        Remove every entry that IS this job object and return how many went.

        Matches by identity, not by the comparator: under FCFS every pair of
        jobs "compares" the same way, so the comparator can't tell them apart.
        """
        before = len(self._jobs)
        self._jobs = [queued for queued in self._jobs if queued is not job]
        return before - len(self._jobs)

    def remove_at(self, rank: int) -> Optional[Job]:
        """Remove and return the job at `rank`. Out of range → None, queue untouched."""
        if 0 <= rank < len(self._jobs):
            return self._jobs.pop(rank)
        return None

    def index_of(self, job_id: int) -> Optional[int]:
        """Rank of the job with this id, or None if it isn't queued."""
        for rank, queued in enumerate(self._jobs):
            if queued.job_id == job_id:
                return rank
        return None

    def size(self) -> int:
        return len(self._jobs)

    def clear(self) -> None:
        self._jobs.clear()

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[Job]:
        return iter(list(self._jobs))
