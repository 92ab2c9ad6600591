import logging

import pytest

from classroll.interface import NotificationSink
from classroll.model import AssignmentStatus
from classroll.student import Student
from classroll.timeline import Timeline


def test_grade_is_none_without_graded_assignments(make_student):
    s = make_student()
    assert s.grade() is None
    s.update_status("A1")
    assert s.grade() is None


def test_overall_grade_is_the_mean_of_graded_assignments(make_student):
    s = make_student()
    s.update_status("A1", 80)
    assert s.status_of("A1") == AssignmentStatus.PASS
    assert s.grade() == 80
    s.update_status("A2", 30)
    assert s.status_of("A2") == AssignmentStatus.FAIL
    assert s.grade() == 55
    assert s.overall_grade == 55


def test_update_status_notifies_only_on_creation_and_grading(make_student, sink):
    s = make_student()
    s.update_status("A1")
    s.update_status("A1")
    assert sink.statuses("Ada Student", "A1") == ["released"]
    s.update_status("A1", 50)
    assert sink.statuses("Ada Student", "A1") == ["released", "fail"]
    assert [a.name for a in s.assignments] == ["A1"]


def test_assignments_keep_first_touch_order(make_student):
    s = make_student()
    s.start_working("B")
    s.update_status("A")
    s.submit("C")
    assert [a.name for a in s.assignments] == ["B", "A", "C"]


def test_work_timer_submits_then_grading_timer_grades(make_student, sink, timeline):
    s = make_student(grades=(42,))
    s.start_working("A1")
    assert s.status_of("A1") == AssignmentStatus.WORKING

    timeline.advance(499)
    assert s.status_of("A1") == AssignmentStatus.WORKING
    timeline.advance(1)
    assert s.status_of("A1") == AssignmentStatus.SUBMITTED

    timeline.advance(500)
    assert s.status_of("A1") == AssignmentStatus.FAIL
    assert s.find_assignment("A1").grade == 42
    assert s.grade() == 42
    assert sink.statuses("Ada Student", "A1") == ["working", "submitted", "fail"]


def test_submit_twice_notifies_submitted_once(make_student, sink, timeline):
    s = make_student()
    s.submit("A1")
    s.submit("A1")
    assert sink.statuses("Ada Student", "A1") == ["submitted"]
    timeline.run_until_idle()
    assert sink.statuses("Ada Student", "A1") == ["submitted", "pass"]


def test_submit_after_grading_is_a_noop(make_student, sink, timeline):
    s = make_student()
    s.update_status("A1", 90)
    s.submit("A1")
    assert s.status_of("A1") == AssignmentStatus.PASS
    assert timeline.pending() == 0


def test_reminder_short_circuits_to_submission(make_student, sink, timeline):
    s = make_student(grades=(75,))
    s.update_status("A1")
    s.handle_reminder("A1")
    assert s.status_of("A1") == AssignmentStatus.SUBMITTED

    timeline.run_until_idle()
    assert sink.statuses("Ada Student", "A1") == ["released", "final_reminder", "submitted", "pass"]
    assert timeline.now == 500


def test_reminder_never_creates_an_assignment(make_student, sink):
    s = make_student()
    s.handle_reminder("A1")
    assert s.find_assignment("A1") is None
    assert sink.events == []


def test_reminder_after_submission_is_ignored(make_student, sink):
    s = make_student()
    s.submit("A1")
    s.handle_reminder("A1")
    assert sink.statuses("Ada Student", "A1") == ["submitted"]


def test_restarting_work_replaces_the_work_timer(make_student, sink, timeline):
    s = make_student()
    s.start_working("A1")
    first = s.pending_timer("A1")
    timeline.advance(300)
    s.start_working("A1")
    assert first.cancelled
    assert s.pending_timer("A1") is not first

    # the first timer would have fired at t=500
    timeline.advance(400)
    assert s.status_of("A1") == AssignmentStatus.WORKING

    timeline.advance(100)
    assert s.status_of("A1") == AssignmentStatus.SUBMITTED
    assert sink.statuses("Ada Student", "A1") == ["working", "working", "submitted"]


def test_stale_work_timer_after_reminder_does_nothing(make_student, sink, timeline):
    s = make_student(grades=(10,))
    s.start_working("A1")
    timeline.advance(200)
    s.handle_reminder("A1")
    timeline.run_until_idle()
    assert sink.statuses("Ada Student", "A1") == ["working", "final_reminder", "submitted", "fail"]
    # grading ran off the reminder's submission at t=200
    assert timeline.now == 700


def test_cancel_timers_leaves_grading_alone(make_student, timeline):
    s = make_student()
    s.start_working("A1")
    s.submit("A2")
    assert s.cancel_timers() == 1
    timeline.run_until_idle()
    assert s.status_of("A1") == AssignmentStatus.WORKING
    assert s.status_of("A2") == AssignmentStatus.PASS


def test_start_working_does_not_reopen_a_graded_assignment(make_student, sink, timeline):
    s = make_student(grades=(10,))
    s.update_status("A1", 80)
    s.start_working("A1")
    assert s.status_of("A1") == AssignmentStatus.PASS
    assert s.pending_timer("A1") is None

    timeline.run_until_idle()
    assert s.find_assignment("A1").grade == 80
    assert s.grade() == 80
    assert sink.statuses("Ada Student", "A1") == ["released", "pass"]


def test_start_working_does_not_reopen_a_submission(make_student, sink, timeline):
    s = make_student(grades=(65,))
    s.submit("A1")
    s.start_working("A1")
    assert s.status_of("A1") == AssignmentStatus.SUBMITTED

    timeline.run_until_idle()
    assert sink.statuses("Ada Student", "A1") == ["submitted", "pass"]
    assert timeline.now == 500


def test_grading_timer_overrides_a_direct_grade(make_student, sink, timeline):
    s = make_student(grades=(10,))
    s.submit("A1")
    s.update_status("A1", 90)
    assert s.grade() == 90

    # the grading timer scheduled by submit still fires
    timeline.run_until_idle()
    assert s.find_assignment("A1").grade == 10
    assert s.status_of("A1") == AssignmentStatus.FAIL
    assert s.grade() == 10
    assert sink.statuses("Ada Student", "A1") == ["submitted", "pass", "fail"]


def assert_graded_iff_pass_or_fail(student):
    for a in student.assignments:
        graded = a.status in (AssignmentStatus.PASS, AssignmentStatus.FAIL)
        assert a.has_grade() == graded, (a.name, a.status, a.grade)


def test_grade_is_set_only_for_pass_or_fail(make_student, timeline):
    s = make_student(grades=(70, 20, 55))
    s.start_working("worked")
    s.update_status("reminded")
    s.handle_reminder("reminded")
    s.update_status("regraded", 80)
    s.start_working("regraded")

    for _ in range(4):
        assert_graded_iff_pass_or_fail(s)
        timeline.advance(250)

    assert_graded_iff_pass_or_fail(s)
    assert [s.status_of(n) for n in ("worked", "reminded", "regraded")] == [
        AssignmentStatus.FAIL, AssignmentStatus.PASS, AssignmentStatus.PASS]
    assert s.grade() == pytest.approx((20 + 70 + 80) / 3)


class ExplodingSink(NotificationSink):
    def notify(self, student, assignment_name, status):
        raise RuntimeError("sink is down")


def test_failing_sink_does_not_interrupt_transitions(caplog):
    tl = Timeline()
    s = Student("Ada Student", "ada@example.com", sink=ExplodingSink(), timeline=tl,
                grade_source=lambda: 60)
    with caplog.at_level(logging.ERROR, logger="classroll"):
        s.start_working("A1")
        tl.run_until_idle()
    assert s.status_of("A1") == AssignmentStatus.PASS
    assert "Notification sink failed" in caplog.text


def test_student_without_sink_still_transitions():
    tl = Timeline()
    s = Student("Ada Student", "ada@example.com", timeline=tl, grade_source=lambda: 5)
    s.handle_reminder("A1")
    s.update_status("A1")
    s.handle_reminder("A1")
    tl.run_until_idle()
    assert s.status_of("A1") == AssignmentStatus.FAIL


def test_custom_delays():
    tl = Timeline()
    s = Student("Ada Student", "ada@example.com", timeline=tl, work_delay=10, grade_delay=20,
                grade_source=lambda: 99)
    s.start_working("A1")
    tl.run_until_idle()
    assert tl.now == 30
    assert s.grade() == 99


def test_table_items(make_student):
    s = make_student()
    s.update_status("A1", 80)
    s.update_status("A2")
    assert s.table_items() == ["Ada Student", "ada@example.com", "A1: pass (80), A2: released", "80.0"]
