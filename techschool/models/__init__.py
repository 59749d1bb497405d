# techschool/models/__init__.py
# Import every domain model so Base.metadata knows all tables

from techschool.modules.channels.models import Channel
from techschool.modules.tags.models import Language, Framework, Tool, Fundamentals
from techschool.modules.courses.models import Course, CourseType

__all__ = [
    "Channel",
    "Language",
    "Framework",
    "Tool",
    "Fundamentals",
    "Course",
    "CourseType",
]
