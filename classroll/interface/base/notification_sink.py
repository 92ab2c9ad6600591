from abc import ABC, abstractmethod
from pydantic import BaseModel


class NotificationSink(ABC, BaseModel):
    # -----------------------------------------------------------------------------------------
    @abstractmethod
    def notify(self, student, assignment_name: str, status):
        """
        receives one assignment status change; implementations must not raise

        Parameters
        ----------
        student: Student
        assignment_name: str
        status: AssignmentStatus or str
        """
        pass

    # -----------------------------------------------------------------------------------------
