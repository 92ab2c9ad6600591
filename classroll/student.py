import random
from typing import Dict, List, Optional
from .model.assignment import Assignment
from .model.status import AssignmentStatus, SUBMITTED_OR_GRADED, OUTSTANDING
from .timeline import Timeline, Timer
from .util import get_logger

WORK_TIMER = 'work'
GRADE_TIMER = 'grade'


def random_grade():
    return random.randint(0, 100)


class Student:
    """
    A student on the classlist. The student owns its assignments and the timers
    that move them from working to submitted and from submitted to graded.

    Parameters
    ----------
    full_name: str
    email: str
    sink: NotificationSink
        receives every status change; shared with the rest of the roster
    timeline: Timeline
        the clock every timer is scheduled on; a private one is created if omitted
    work_delay: int
        ticks between start_working and the automatic submission
    grade_delay: int
        ticks between submission and grading
    grade_source: callable
        returns an integer grade in [0, 100]
    """

    def __init__(self, full_name, email, sink=None, timeline=None,
                 work_delay=500, grade_delay=500, grade_source=None):
        self.full_name = full_name
        self.email = email
        self.assignments: List[Assignment] = []
        self.overall_grade: Optional[float] = None
        self.sink = sink
        self.timeline = timeline if timeline is not None else Timeline()
        self.work_delay = work_delay
        self.grade_delay = grade_delay
        self.grade_source = grade_source if grade_source is not None else random_grade
        self._pending_timers: Dict[str, Dict[str, Timer]] = {}

    def __repr__(self):
        return f"{self.full_name} ({self.email})"

    @classmethod
    def table_headings(cls):
        return ['Name', 'Email', 'Assignments', 'Overall Grade']

    def table_items(self):
        statuses = ', '.join(f"{a.name}: {a.status.value}" + (f" ({a.grade})" if a.has_grade() else '')
                             for a in self.assignments)
        grade = self.grade()
        return [self.full_name, self.email, statuses, '-' if grade is None else f"{grade:.1f}"]

    # -----------------------------------------------------------------------------------------
    def find_assignment(self, name) -> Optional[Assignment]:
        for a in self.assignments:
            if a.name == name:
                return a
        return None

    def status_of(self, name) -> Optional[AssignmentStatus]:
        a = self.find_assignment(name)
        return None if a is None else a.status

    def _ensure_assignment(self, name) -> Assignment:
        a = self.find_assignment(name)
        if a is None:
            a = Assignment(name=name)
            self.assignments.append(a)
        return a

    def _notify(self, assignment):
        if self.sink is None:
            return
        try:
            self.sink.notify(self, assignment.name, assignment.status)
        except Exception:
            # a broken sink must not interrupt the transition that called it
            get_logger().exception(f"Notification sink failed for {self.full_name}, {assignment.name}")

    def _update_overall_grade(self):
        graded = [a.grade for a in self.assignments if a.has_grade()]
        if len(graded) == 0:
            self.overall_grade = None
        else:
            self.overall_grade = sum(graded) / len(graded)

    def _set_timer(self, name, kind, timer):
        if name not in self._pending_timers:
            self._pending_timers[name] = {}
        self._pending_timers[name][kind] = timer

    def pending_timer(self, name, kind=WORK_TIMER) -> Optional[Timer]:
        timer = self._pending_timers.get(name, {}).get(kind)
        if timer is not None and timer.live():
            return timer
        return None

    # -----------------------------------------------------------------------------------------
    def update_status(self, name, grade=None):
        """
        creates the assignment if needed and optionally grades it

        Parameters
        ----------
        name: str
        grade: int, optional
            if given, the assignment moves to pass or fail and the overall grade is recomputed
        """
        a = self.find_assignment(name)
        if a is None:
            a = self._ensure_assignment(name)
            self._notify(a)

        if isinstance(grade, (int, float)) and not isinstance(grade, bool):
            a.set_grade(grade)
            self._update_overall_grade()
            self._notify(a)

    # -----------------------------------------------------------------------------------------
    def grade(self) -> Optional[float]:
        self._update_overall_grade()
        return self.overall_grade

    # -----------------------------------------------------------------------------------------
    def start_working(self, name):
        """
        marks the assignment as being worked on and (re)starts its work timer;
        when the timer fires, the assignment is submitted unless it has already
        moved on through another path; submitted and graded assignments are left alone
        """
        logger = get_logger()
        a = self._ensure_assignment(name)

        # work cannot restart once the assignment is submitted
        if a.status in SUBMITTED_OR_GRADED:
            logger.debug(f"{self.full_name} cannot start work on {name} with status {a.status.value}")
            return

        a.status = AssignmentStatus.WORKING
        self._notify(a)

        previous = self.pending_timer(name, WORK_TIMER)
        if previous is not None:
            logger.info(f"{self.full_name} restarted work on {name}; cancelling the previous work timer")
            previous.cancel()

        timer = self.timeline.call_later(self.work_delay, self._work_timer_fired, name)
        self._set_timer(name, WORK_TIMER, timer)

    def _work_timer_fired(self, name):
        a = self.find_assignment(name)
        if a.status in OUTSTANDING:
            self.submit(name)
        else:
            get_logger().debug(f"Work timer for {self.full_name}, {name} fired with status "
                               f"{a.status.value}; nothing to do")

    # -----------------------------------------------------------------------------------------
    def submit(self, name):
        a = self._ensure_assignment(name)

        # submission cannot repeat or regress
        if a.status in SUBMITTED_OR_GRADED:
            return

        a.status = AssignmentStatus.SUBMITTED
        self._notify(a)

        # the grading timer is never cancelled once scheduled
        timer = self.timeline.call_later(self.grade_delay, self._grade_timer_fired, name)
        self._set_timer(name, GRADE_TIMER, timer)

    def _grade_timer_fired(self, name):
        a = self.find_assignment(name)
        a.set_grade(self.grade_source())
        self._update_overall_grade()
        self._notify(a)

    # -----------------------------------------------------------------------------------------
    def handle_reminder(self, name):
        """
        a final reminder skips the rest of the work period and submits right away;
        reminders never create assignments
        """
        a = self.find_assignment(name)
        if a is None:
            return

        if a.status in SUBMITTED_OR_GRADED:
            return

        a.status = AssignmentStatus.FINAL_REMINDER
        self._notify(a)

        self.submit(name)

    # -----------------------------------------------------------------------------------------
    def cancel_timers(self):
        """
        cancels every pending work timer; grading timers are left alone

        Returns
        -------
        cancelled: int
        """
        cancelled = 0
        for name in self._pending_timers:
            timer = self.pending_timer(name, WORK_TIMER)
            if timer is not None:
                timer.cancel()
                cancelled += 1
        return cancelled
