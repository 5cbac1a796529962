"""Course Locks — per-course mutual exclusion for seat accounting.

Invariants:
    - At most one enroll/drop mutates a given course's enrolled_count at a time
    - Operations on different courses never block each other
    - lock_for() returns the same Lock for the same course code for the registry's lifetime

Design Decisions:
    - asyncio.Lock per course code, created lazily: the service runs on one event loop,
      and dict access between awaits is atomic there
    - Registry is injected into EnrollmentService so tests can share or isolate it
"""

import asyncio

from siakad.core.domain_types import CourseCode


class CourseLockRegistry:
    """Lazily created asyncio.Lock per course code."""

    def __init__(self) -> None:
        self._locks: dict[CourseCode, asyncio.Lock] = {}

    def lock_for(self, course_code: CourseCode) -> asyncio.Lock:
        lock = self._locks.get(course_code)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[course_code] = lock
        return lock

    def __len__(self) -> int:
        return len(self._locks)
