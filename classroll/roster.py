from typing import List, Optional
import terminaltables as ttbl
from .model.status import OUTSTANDING
from .student import Student
from .timeline import Timeline, Completion, gather
from .util import get_logger


class Roster:
    """
    The classlist. Holds students in the order they were added and applies
    roster-wide operations to all of them.

    Parameters
    ----------
    sink: NotificationSink
        handed to the students created through enroll
    timeline: Timeline
        shared by every student the roster creates; a private one is created if omitted
    release_delay: int
        ticks before each per-assignment release fan-out runs
    """

    def __init__(self, sink=None, timeline=None, release_delay=0):
        self.sink = sink
        self.timeline = timeline if timeline is not None else Timeline()
        self.release_delay = release_delay
        self.students: List[Student] = []

    def __len__(self):
        return len(self.students)

    def __iter__(self):
        return iter(self.students)

    # -----------------------------------------------------------------------------------------
    def enroll(self, full_name, email, **kwargs) -> Student:
        """
        creates a student wired to this roster's sink and timeline, and adds it
        """
        student = Student(full_name, email, sink=self.sink, timeline=self.timeline, **kwargs)
        self.add(student)
        return student

    def add(self, student: Student):
        self.students.append(student)
        get_logger().info(f"{student.full_name} has been added to the classlist.")

    def remove(self, student, cancel_timers=False) -> List[Student]:
        """
        removes a student by identity, or every student with a matching full name
        when given a string

        Parameters
        ----------
        student: Student or str
        cancel_timers: bool
            if True, the removed students' pending work timers are cancelled;
            otherwise their timers keep firing against the detached students

        Returns
        -------
        removed: List[Student]
        """
        logger = get_logger()
        if isinstance(student, str):
            removed = [s for s in self.students if s.full_name == student]
        else:
            removed = [s for s in self.students if s is student]
        self.students = [s for s in self.students if not any(s is r for r in removed)]

        for s in removed:
            logger.info(f"{s.full_name} has been removed from the classlist.")
            if cancel_timers:
                n = s.cancel_timers()
                logger.info(f"Cancelled {n} pending work timers for {s.full_name}")
        return removed

    def find_by_name(self, name) -> Optional[Student]:
        for s in self.students:
            if s.full_name == name:
                return s
        return None

    # -----------------------------------------------------------------------------------------
    def outstanding(self, name=None) -> List[Student]:
        """
        finds students with work left to do

        Parameters
        ----------
        name: str, optional
            if given, students whose assignment of that name is missing or not yet submitted;
            otherwise, students with any assignment not yet submitted

        Returns
        -------
        students: List[Student]
        """
        result = []
        if name:
            for s in self.students:
                status = s.status_of(name)
                if status is None or status in OUTSTANDING:
                    result.append(s)
        else:
            for s in self.students:
                if any(a.status in OUTSTANDING for a in s.assignments):
                    result.append(s)
        return result

    # -----------------------------------------------------------------------------------------
    def release_all(self, names) -> Completion:
        """
        releases every named assignment to every student; each name is fanned
        out on its own timer tick

        Parameters
        ----------
        names: sequence of str

        Returns
        -------
        released: Completion
            resolves once every name has been applied to every student
        """
        logger = get_logger()
        completions = []
        for name in names:
            done = Completion()
            self.timeline.call_later(self.release_delay, self._release_one, name, done)
            completions.append(done)
        logger.info(f"Scheduled release of {len(completions)} assignments to {len(self.students)} students")
        return gather(completions)

    def _release_one(self, name, done):
        for s in list(self.students):
            s.update_status(name)
        get_logger().info(f"Released {name} to {len(self.students)} students")
        done.resolve(name)

    def send_reminder(self, name):
        for s in list(self.students):
            s.handle_reminder(name)

    # -----------------------------------------------------------------------------------------
    def summary_table(self, title='Classlist') -> str:
        tbl = [Student.table_headings()]
        for s in self.students:
            tbl.append(s.table_items())
        return ttbl.AsciiTable(tbl, title).table
