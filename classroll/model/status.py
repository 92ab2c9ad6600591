from enum import Enum


class AssignmentStatus(str, Enum):
    RELEASED = "released"
    WORKING = "working"
    SUBMITTED = "submitted"
    FINAL_REMINDER = "final_reminder"
    PASS = "pass"
    FAIL = "fail"


# statuses that a submission can never move back out of
SUBMITTED_OR_GRADED = (AssignmentStatus.SUBMITTED, AssignmentStatus.PASS, AssignmentStatus.FAIL)

# statuses that still count as outstanding work for the student
OUTSTANDING = (AssignmentStatus.RELEASED, AssignmentStatus.WORKING, AssignmentStatus.FINAL_REMINDER)
