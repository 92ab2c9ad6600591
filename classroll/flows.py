import os
import sys
import yaml

from classroll.model import Settings
from classroll.roster import Roster
from classroll.tasks import get_notification_sink, get_grade_source
from classroll.timeline import Timeline
from classroll.util import get_logger


# -------------------------------------------------------------------------------------------------------------
def load_settings(path=None):
    # no path means the built-in demo settings
    if path is None:
        return Settings()

    print(f"Loading the classroll configuration file {path}...")
    if not os.path.exists(path):
        sys.exit(
            f"""
              There is no configuration file at {path},
              and no other file was specified on the command line. Please
              specify a valid configuration file path.
              """
        )
    else:
        with open(path) as f:
            config = yaml.safe_load(f)

    return Settings.model_validate(config or {})


# -------------------------------------------------------------------------------------------------------------
def run_demo(settings: Settings, sink=None, timeline=None, grade_source=None) -> Roster:
    """
    releases the configured assignments to the configured students, starts the
    work plan once the release completes, sends the reminder, and runs the
    timeline until every timer has fired

    Parameters
    ----------
    settings: Settings
    sink: NotificationSink, optional
        defaults to an instance of settings.notifier_class
    timeline: Timeline, optional
    grade_source: callable, optional
        defaults to a random source seeded with settings.seed

    Returns
    -------
    roster: Roster
    """
    logger = get_logger()

    if sink is None:
        sink = get_notification_sink(settings)
    if timeline is None:
        timeline = Timeline()
    if grade_source is None:
        grade_source = get_grade_source(settings)

    roster = Roster(sink=sink, timeline=timeline, release_delay=settings.release_delay)
    for info in settings.students:
        roster.enroll(info.full_name, info.email, work_delay=settings.work_delay,
                      grade_delay=settings.grade_delay, grade_source=grade_source)

    def start_work_plan(_):
        logger.info(f"All {len(settings.assignments)} assignments released at t={timeline.now}")
        for student_name, assignment_name in settings.work_plan.items():
            student = roster.find_by_name(student_name)
            if student is None:
                logger.warning(f"Work plan names {student_name}, who is not on the classlist; skipping")
                continue
            student.start_working(assignment_name)

        if settings.reminder_assignment:
            timeline.call_later(settings.reminder_after, roster.send_reminder, settings.reminder_assignment)

    released = roster.release_all(settings.assignments)
    released.add_done_callback(start_work_plan)

    timeline.run_until_idle(pace=settings.pace)
    logger.info(f"Demo finished at t={timeline.now}")
    return roster
