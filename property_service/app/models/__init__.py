from .properties import Property
from .tasks import Task
