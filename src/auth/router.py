from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from src.database import get_db
from src.auth.schemas import UserCreate, User, LoginRequest, AuthResponse, TokenClaims
from src.auth.service import UserService
from src.auth.dependencies import get_current_claims
from src.exceptions import NotFound

router = APIRouter()

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(user: UserCreate, db: Session = Depends(get_db)):
    """Register a new user"""
    db_user, token = UserService.register(db, user)
    return AuthResponse(
        message="User registered successfully",
        user=User.model_validate(db_user),
        token=token
    )

@router.post("/login", response_model=AuthResponse)
def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    """Log in with email and password"""
    user, token = UserService.login(db, login_data)
    return AuthResponse(
        message="Login successful",
        user=User.model_validate(user),
        token=token
    )

@router.get("/me", response_model=User)
def read_users_me(claims: TokenClaims = Depends(get_current_claims), db: Session = Depends(get_db)):
    """Get current user profile"""
    user = UserService.get_user_by_id(db, claims.id)
    if not user:
        raise NotFound("User not found")
    return user
