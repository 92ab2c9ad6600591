__version__ = '0.1.0'

from .model import Assignment, AssignmentStatus, Settings
from .interface import NotificationSink
from .notification import ConsoleNotifier, LoggingNotifier, DigestNotifier, NotifyError
from .timeline import Timeline, Timer, Completion, gather
from .student import Student
from .roster import Roster
