from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from .status import AssignmentStatus

# a grade must be strictly greater than this to pass
PASS_THRESHOLD = 50


class Assignment(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str
    status: AssignmentStatus = AssignmentStatus.RELEASED
    grade: Optional[int] = Field(default=None, ge=0, le=100)

    # -----------------------------------------------------------------------------------------
    def set_grade(self, grade: int):
        """
        records a numeric grade and moves the assignment to pass or fail

        Parameters
        ----------
        grade: int
            between 0 and 100 inclusive; exactly 50 is a fail
        """
        self.grade = grade
        self.status = AssignmentStatus.PASS if grade > PASS_THRESHOLD else AssignmentStatus.FAIL

    # -----------------------------------------------------------------------------------------
    def has_grade(self) -> bool:
        return self.grade is not None
