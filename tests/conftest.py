from typing import List, Tuple

import pytest

from classroll.interface import NotificationSink
from classroll.roster import Roster
from classroll.student import Student
from classroll.timeline import Timeline
from classroll.util import status_value


class RecordingSink(NotificationSink):
    events: List[Tuple[str, str, str]] = []

    def notify(self, student, assignment_name, status):
        self.events.append((student.full_name, assignment_name, status_value(status)))

    def statuses(self, full_name, assignment_name):
        return [e[2] for e in self.events if e[0] == full_name and e[1] == assignment_name]


def fixed_grades(*grades):
    """Grade source that hands out the given grades in order."""
    remaining = list(grades)

    def grade_source():
        return remaining.pop(0)

    return grade_source


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def timeline():
    return Timeline()


@pytest.fixture
def make_student(sink, timeline):
    def _make(full_name="Ada Student", email="ada@example.com", grades=(75,)):
        return Student(full_name, email, sink=sink, timeline=timeline,
                       grade_source=fixed_grades(*grades))
    return _make


@pytest.fixture
def roster(sink, timeline):
    return Roster(sink=sink, timeline=timeline)
