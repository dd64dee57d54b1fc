from backend.app.models.student import Student
from backend.app.models.employer import Employer
from backend.app.models.admin import Admin
from backend.app.models.university import University
from backend.app.models.job import Job
from backend.app.models.event import Event, EventRegistration
from backend.app.models.resource import Resource
from backend.app.models.bookmark import BookmarkedJob
from backend.app.models.tracking import UserSession, PageView, UserAction
