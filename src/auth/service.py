from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from src.models import User
from src.auth.schemas import UserCreate, LoginRequest, normalize_email
from src.auth.utils import get_password_hash, verify_password, issue_token
from src.exceptions import DuplicateEmail, InvalidCredentials, ValidationError
from src.logger import logger
from typing import Optional, Tuple

class UserService:
    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == normalize_email(email)).first()

    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
        """Get user by ID"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def create_user(db: Session, user: UserCreate, role: str = "user") -> User:
        """Create a new user with a hashed password"""
        if UserService.get_user_by_email(db, user.email):
            raise DuplicateEmail()

        try:
            hashed_password = get_password_hash(user.password)
        except ValueError:
            raise ValidationError("Password is too long")

        db_user = User(
            name=user.name,
            email=user.email,
            password=hashed_password,
            role=role
        )

        try:
            db.add(db_user)
            db.commit()
            db.refresh(db_user)
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            db.rollback()
            raise DuplicateEmail()

        logger.info(f"Registered user {db_user.id} ({db_user.email})")
        return db_user

    @staticmethod
    def register(db: Session, user: UserCreate) -> Tuple[User, str]:
        """Register a regular user and issue their first token"""
        db_user = UserService.create_user(db, user)
        return db_user, issue_token(db_user)

    @staticmethod
    def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password"""
        user = UserService.get_user_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.password):
            return None
        return user

    @staticmethod
    def login(db: Session, login_data: LoginRequest) -> Tuple[User, str]:
        """Check credentials and issue a token; never reveals which field was wrong"""
        user = UserService.authenticate_user(db, login_data.email, login_data.password)
        if not user:
            logger.warning(f"Failed login attempt for {login_data.email}")
            raise InvalidCredentials()

        logger.info(f"User {user.id} logged in")
        return user, issue_token(user)
