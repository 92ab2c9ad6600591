from .status import AssignmentStatus
from .assignment import Assignment
from .settings import Settings, StudentInfo
