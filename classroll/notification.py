from typing import Dict, List
import click
from .interface import NotificationSink
from .model.status import AssignmentStatus
from .util import get_logger, status_value

PHRASES = {
    AssignmentStatus.RELEASED.value: "has been released",
    AssignmentStatus.WORKING.value: "is working on",
    AssignmentStatus.SUBMITTED.value: "has submitted",
    AssignmentStatus.FINAL_REMINDER.value: "has received a final reminder for",
    AssignmentStatus.PASS.value: "has passed",
    AssignmentStatus.FAIL.value: "has failed",
}


class NotifyError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


def render(student, assignment_name, status):
    value = status_value(status)
    # unknown statuses still get a readable line
    phrase = PHRASES.get(value, f'has status "{value}" for')
    return f"Observer → {student.full_name}, {assignment_name} {phrase}."


class ConsoleNotifier(NotificationSink):
    def notify(self, student, assignment_name, status):
        click.echo(render(student, assignment_name, status))


class LoggingNotifier(NotificationSink):
    def notify(self, student, assignment_name, status):
        get_logger().info(render(student, assignment_name, status))


class DigestNotifier(NotificationSink):
    """
    Collects rendered notifications per student email and sends each recipient
    a single digest when notify_all is called.
    """
    separator: str = '\n-------------------\n'
    notifications: Dict[str, List[str]] = {}

    def notify(self, student, assignment_name, status):
        self.submit(student.email, render(student, assignment_name, status))

    def submit(self, recipient, message):
        if recipient not in self.notifications:
            self.notifications[recipient] = []
        self.notifications[recipient].append(message)

    def notify_all(self):
        logger = get_logger()
        sent = 0
        for recip in self.notifications:
            if len(self.notifications[recip]) > 0:
                try:
                    self.deliver(recip, self.separator.join(self.notifications[recip]))
                    sent += 1
                except NotifyError as e:
                    logger.error(f"Failed to deliver digest to {recip}: {e.message}")
                    # undelivered messages stay buffered for the next notify_all
                    continue
            self.notifications[recip] = []
        return sent

    def deliver(self, recipient, message):
        if not recipient:
            raise NotifyError("recipient has no address")
        get_logger().info(f"Digest for {recipient}:\n{message}")
