"""
Authentication service business logic (students, employers, admins)
"""
from typing import Type, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash, verify_password
from backend.app.models.admin import Admin
from backend.app.models.employer import Employer
from backend.app.models.student import Student
from backend.app.models.university import University
from backend.app.schemas.user import AdminSignup, EmployerSignup, LoginIn, StudentSignup

Account = Union[Student, Employer, Admin]


class AuthService:
    """Service for signup/login of the three account types"""

    @staticmethod
    def _register(db: Session, model: Type[Account], data: dict):
        existing = db.query(model).filter(model.email == data["email"]).first()
        if existing:
            return {"success": False, "message": "Email already registered"}

        data["password"] = get_password_hash(data["password"])
        account = model(**data)
        try:
            db.add(account)
            db.commit()
            db.refresh(account)
        except IntegrityError:
            db.rollback()
            return {"success": False, "message": "Email already registered"}
        return {"success": True, "account": account}

    @staticmethod
    def register_student(db: Session, signup: StudentSignup):
        """Register a new student"""
        data = signup.model_dump()
        if data.get("university_id"):
            university = db.query(University).filter(University.id == data["university_id"]).first()
            if not university:
                return {"success": False, "message": "University not found"}
        return AuthService._register(db, Student, data)

    @staticmethod
    def register_employer(db: Session, signup: EmployerSignup):
        """Register a new employer"""
        return AuthService._register(db, Employer, signup.model_dump())

    @staticmethod
    def register_admin(db: Session, signup: AdminSignup):
        """Register a new admin"""
        data = signup.model_dump()
        data["role"] = signup.role.value
        return AuthService._register(db, Admin, data)

    @staticmethod
    def login(db: Session, model: Type[Account], login_data: LoginIn):
        """Check credentials; the caller sets the identity cookie on success"""
        account = db.query(model).filter(model.email == login_data.email).first()
        if not account or not verify_password(login_data.password, account.password):
            return {"success": False, "message": "Invalid email or password"}
        return {"success": True, "account": account, "message": "Login successful"}
