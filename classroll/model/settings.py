from typing import Dict, List, Optional
from pydantic import BaseModel, field_validator


class StudentInfo(BaseModel):
    full_name: str
    email: str


class Settings(BaseModel):

    # timer delays, in ticks of the simulated timeline
    work_delay: int = 500
    grade_delay: int = 500
    release_delay: int = 0

    # seed for the random grade source; None draws from system entropy
    seed: Optional[int] = None

    # dotted path to the NotificationSink subclass handed to every student
    notifier_class: str = "classroll.notification.ConsoleNotifier"

    log_level: str = "INFO"

    # wall-clock seconds slept per tick when the demo drains the timeline
    pace: float = 0.0

    # demo classlist and timeline
    students: List[StudentInfo] = [
        StudentInfo(full_name="John Lastname", email="John@uwo.ca"),
        StudentInfo(full_name="Sporngle Gerfunkle", email="Sporngle@uwo.ca"),
    ]
    assignments: List[str] = ["A1", "A2"]
    # map of student full name to the assignment they start working on after release
    work_plan: Dict[str, str] = {"John Lastname": "A1", "Sporngle Gerfunkle": "A2"}
    reminder_after: int = 200
    reminder_assignment: Optional[str] = "A1"

    @field_validator("work_delay", "grade_delay", "release_delay", "reminder_after")
    @classmethod
    def non_negative(cls, v):
        if v < 0:
            raise ValueError("delays must be non-negative")
        return v

    @field_validator("pace")
    @classmethod
    def non_negative_pace(cls, v):
        if v < 0:
            raise ValueError("pace must be non-negative")
        return v
