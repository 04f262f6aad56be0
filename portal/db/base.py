# /portal/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# Importing them here guarantees that `Base.metadata` knows every table
# before `create_all` runs at startup.

from .base_class import Base

from .models.user_model import User
from .models.academic_models import Program, Major, Section, Course
from .models.student_models import Student
from .models.timetable_models import CourseRequest, TimetableEntry
