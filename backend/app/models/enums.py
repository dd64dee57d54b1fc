"""
Enumerated tags stored as plain strings on the models
"""
import enum


class UserType(str, enum.Enum):
    ANONYMOUS = "ANONYMOUS"
    STUDENT = "STUDENT"
    EMPLOYER = "EMPLOYER"
    ADMIN = "ADMIN"


class ActionType(str, enum.Enum):
    BUTTON_CLICK = "BUTTON_CLICK"
    FORM_SUBMIT = "FORM_SUBMIT"
    JOB_APPLY = "JOB_APPLY"
    JOB_BOOKMARK = "JOB_BOOKMARK"
    EVENT_REGISTER = "EVENT_REGISTER"
    RESOURCE_DOWNLOAD = "RESOURCE_DOWNLOAD"
    SEARCH = "SEARCH"
    FILTER = "FILTER"
    UNKNOWN = "UNKNOWN"


class JobStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class EventType(str, enum.Enum):
    WEBINAR = "WEBINAR"
    WORKSHOP = "WORKSHOP"
    CONTEST = "CONTEST"
    OTHER = "OTHER"


class AdminRole(str, enum.Enum):
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"
