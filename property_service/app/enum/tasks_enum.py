from enum import Enum


class TaskType(str, Enum):
    CLEANING = "CLEANING"
    MAINTENANCE = "MAINTENANCE"
    INSPECTION = "INSPECTION"


# transitions between values are unrestricted
class TaskStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
