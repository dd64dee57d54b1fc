"""Tests for identity resolution and the one-way session identification rule"""
from backend.app.core.identity import ANONYMOUS, Identity, resolve_identity
from backend.app.models.enums import UserType
from backend.app.models.tracking import UserSession
from backend.app.services.tracking_service import TrackingService


def test_no_cookies_is_anonymous():
    assert resolve_identity() == ANONYMOUS
    assert resolve_identity().is_anonymous


def test_empty_cookie_counts_as_absent():
    assert resolve_identity(student_id="", employer_id="e1") == Identity(UserType.EMPLOYER, "e1")


def test_student_beats_employer_and_admin():
    assert resolve_identity("s1", "e1", "a1") == Identity(UserType.STUDENT, "s1")


def test_employer_beats_admin():
    assert resolve_identity(None, "e1", "a1") == Identity(UserType.EMPLOYER, "e1")


def test_admin_alone():
    assert resolve_identity(admin_id="a1") == Identity(UserType.ADMIN, "a1")


def _anonymous_session() -> UserSession:
    return UserSession(session_id="x", user_type=UserType.ANONYMOUS.value)


def test_identify_upgrades_anonymous_session():
    session = _anonymous_session()
    assert TrackingService.identify(session, Identity(UserType.EMPLOYER, "e1")) is True
    assert session.user_type == "EMPLOYER"
    assert session.user_id == "e1"
    assert session.employer_id == "e1"
    assert session.student_id is None


def test_identify_with_anonymous_identity_is_noop():
    session = _anonymous_session()
    assert TrackingService.identify(session, ANONYMOUS) is False
    assert session.user_type == "ANONYMOUS"


def test_identified_session_is_final():
    session = _anonymous_session()
    TrackingService.identify(session, Identity(UserType.STUDENT, "s1"))
    assert TrackingService.identify(session, Identity(UserType.ADMIN, "a1")) is False
    assert session.user_type == "STUDENT"
    assert session.user_id == "s1"
