"""
Authentication endpoints - signup and login for students, employers and admins, plus logout.
Login sets the role's identity cookie; logout clears all three.
"""
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from backend.app.core.config import (
    ADMIN_COOKIE,
    EMPLOYER_COOKIE,
    IDENTITY_COOKIES,
    STUDENT_COOKIE,
    settings,
)
from backend.app.core.dependencies import get_db
from backend.app.core.logging_config import get_logger
from backend.app.models.admin import Admin
from backend.app.models.employer import Employer
from backend.app.models.student import Student
from backend.app.schemas.common import MessageResponse
from backend.app.schemas.user import (
    AdminAuthResponse,
    AdminOut,
    AdminSignup,
    EmployerAuthResponse,
    EmployerOut,
    EmployerSignup,
    LoginIn,
    StudentAuthResponse,
    StudentOut,
    StudentSignup,
)
from backend.app.services.auth_service import AuthService

logger = get_logger("api.auth")
router = APIRouter(tags=["authentication"])


def _set_identity_cookie(response: Response, name: str, value: str) -> None:
    response.set_cookie(
        key=name,
        value=value,
        max_age=settings.identity_cookie_max_age,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
    )


def _signup_failed(result: dict, email: str) -> HTTPException:
    logger.warning("Signup failed email=%s reason=%s", email, result["message"])
    if result["message"] == "Email already registered":
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result["message"])
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result["message"])


def _login_failed(result: dict, email: str) -> HTTPException:
    logger.warning("Login failed email=%s", email)
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=result["message"])


@router.post("/auth/signup", response_model=StudentAuthResponse, status_code=status.HTTP_201_CREATED)
def student_signup(signup: StudentSignup, db: Session = Depends(get_db)):
    """
    Register a student account.

    - **email**: must be unique among students
    - **year**: 1 to 6
    - **interests**: at least one
    - **universityId**: optional, must name an existing university
    """
    logger.info("Student signup attempt email=%s", signup.email)
    result = AuthService.register_student(db, signup)
    if not result["success"]:
        raise _signup_failed(result, signup.email)
    student = result["account"]
    logger.info("Student registered student_id=%s", student.id)
    return StudentAuthResponse(
        message="Student registered successfully",
        student=StudentOut.model_validate(student),
    )


@router.post("/auth/login", response_model=StudentAuthResponse)
def student_login(login_data: LoginIn, response: Response, db: Session = Depends(get_db)):
    """Student login. Sets the studentId cookie."""
    result = AuthService.login(db, Student, login_data)
    if not result["success"]:
        raise _login_failed(result, login_data.email)
    student = result["account"]
    _set_identity_cookie(response, STUDENT_COOKIE, student.id)
    logger.info("Student logged in student_id=%s", student.id)
    return StudentAuthResponse(message=result["message"], student=StudentOut.model_validate(student))


@router.post("/employers/signup", response_model=EmployerAuthResponse, status_code=status.HTTP_201_CREATED)
def employer_signup(signup: EmployerSignup, db: Session = Depends(get_db)):
    """Register an employer account"""
    logger.info("Employer signup attempt email=%s", signup.email)
    result = AuthService.register_employer(db, signup)
    if not result["success"]:
        raise _signup_failed(result, signup.email)
    employer = result["account"]
    logger.info("Employer registered employer_id=%s", employer.id)
    return EmployerAuthResponse(
        message="Employer registered successfully",
        employer=EmployerOut.model_validate(employer),
    )


@router.post("/employers/login", response_model=EmployerAuthResponse)
def employer_login(login_data: LoginIn, response: Response, db: Session = Depends(get_db)):
    """Employer login. Sets the employerId cookie."""
    result = AuthService.login(db, Employer, login_data)
    if not result["success"]:
        raise _login_failed(result, login_data.email)
    employer = result["account"]
    _set_identity_cookie(response, EMPLOYER_COOKIE, employer.id)
    logger.info("Employer logged in employer_id=%s", employer.id)
    return EmployerAuthResponse(message=result["message"], employer=EmployerOut.model_validate(employer))


@router.post("/admin/signup", response_model=AdminAuthResponse, status_code=status.HTTP_201_CREATED)
def admin_signup(signup: AdminSignup, db: Session = Depends(get_db)):
    """Register an admin account"""
    logger.info("Admin signup attempt email=%s", signup.email)
    result = AuthService.register_admin(db, signup)
    if not result["success"]:
        raise _signup_failed(result, signup.email)
    admin = result["account"]
    logger.info("Admin registered admin_id=%s role=%s", admin.id, admin.role)
    return AdminAuthResponse(message="Admin registered successfully", admin=AdminOut.model_validate(admin))


@router.post("/admin/login", response_model=AdminAuthResponse)
def admin_login(login_data: LoginIn, response: Response, db: Session = Depends(get_db)):
    """Admin login. Sets the adminId cookie."""
    result = AuthService.login(db, Admin, login_data)
    if not result["success"]:
        raise _login_failed(result, login_data.email)
    admin = result["account"]
    _set_identity_cookie(response, ADMIN_COOKIE, admin.id)
    logger.info("Admin logged in admin_id=%s", admin.id)
    return AdminAuthResponse(message=result["message"], admin=AdminOut.model_validate(admin))


@router.post("/auth/logout", response_model=MessageResponse)
def logout(response: Response):
    """Clear every identity cookie, whichever role was logged in"""
    for name in IDENTITY_COOKIES:
        response.delete_cookie(key=name, path="/")
    return MessageResponse(message="Logged out successfully")
