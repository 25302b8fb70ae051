"""
Authentication Router
Email/password and anonymous sign-in. JWT bearer tokens.
Rate limited: 5 failed attempts = 15 min lockout per email.
"""

from datetime import datetime, timezone, timedelta
from typing import Optional

import bcrypt
import jwt
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session as DBSession

from physics_tutor.config import (
    JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRY_HOURS, MAX_LOGIN_ATTEMPTS,
    LOGIN_LOCKOUT_MINUTES, BCRYPT_ROUNDS, ADMIN_EMAILS,
)
from physics_tutor.database import get_db
from physics_tutor.models import User, LoginAttempt

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ─── Request/Response Models ─────────────────────────────────────────────────

class RegisterRequest(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=8, max_length=128)
    name: Optional[str] = Field(default=None, max_length=100)

class LoginRequest(BaseModel):
    email: str
    password: str

class TokenResponse(BaseModel):
    user_id: str
    name: Optional[str] = None
    role: str
    is_anonymous: bool
    token: str

class UserResponse(BaseModel):
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: str
    is_anonymous: bool


# ─── Passwords ───────────────────────────────────────────────────────────────

def _password_bytes(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes
    return password.encode("utf-8")[:72]


def hash_password(password: str) -> str:
    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(password: str, stored: Optional[str]) -> bool:
    if not stored:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), stored.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash
        return False


# ─── JWT Helpers ─────────────────────────────────────────────────────────────

def create_token(user_id: str, role: str) -> str:
    payload = {
        "sub": user_id,
        "role": role,
        "exp": datetime.now(timezone.utc) + timedelta(hours=JWT_EXPIRY_HOURS),
        "iat": datetime.now(timezone.utc),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def verify_token(token: str) -> dict:
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")


def get_optional_user(request: Request, db: DBSession = Depends(get_db)) -> Optional[User]:
    """FastAPI dependency: the signed-in user, or None when no token is sent.
    A token that is sent but invalid is still rejected."""
    auth = request.headers.get("Authorization", "")
    if not auth.startswith("Bearer "):
        return None
    claims = verify_token(auth[7:])
    user = db.get(User, claims.get("sub"))
    if user is None:
        raise HTTPException(status_code=401, detail="Unknown user")
    return user


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """FastAPI dependency: extract and verify JWT from Authorization header."""
    if user is None:
        raise HTTPException(status_code=401, detail="Missing token")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if user.role != "admin":
        raise HTTPException(status_code=403, detail="Admin access only")
    return user


# ─── Rate Limiting ───────────────────────────────────────────────────────────

def _check_rate_limit(db: DBSession, email: str) -> None:
    """Check if this email is locked out due to failed attempts."""
    cutoff = datetime.now(timezone.utc) - timedelta(minutes=LOGIN_LOCKOUT_MINUTES)
    recent_failures = (
        db.query(LoginAttempt)
        .filter(
            LoginAttempt.email == email,
            LoginAttempt.success.is_(False),
            LoginAttempt.attempted_at >= cutoff,
        )
        .count()
    )
    if recent_failures >= MAX_LOGIN_ATTEMPTS:
        raise HTTPException(
            status_code=429,
            detail=f"Too many failed attempts. Try again in {LOGIN_LOCKOUT_MINUTES} minutes."
        )


def _log_attempt(db: DBSession, email: str, success: bool, ip: str) -> None:
    attempt = LoginAttempt(email=email, success=success, ip_address=ip)
    db.add(attempt)
    db.commit()


def _token_response(user: User) -> TokenResponse:
    return TokenResponse(
        user_id=user.id,
        name=user.name,
        role=user.role,
        is_anonymous=user.is_anonymous,
        token=create_token(user.id, user.role),
    )


# ─── Endpoints ───────────────────────────────────────────────────────────────

@router.post("/register", response_model=TokenResponse, status_code=201)
def register(req: RegisterRequest, db: DBSession = Depends(get_db)):
    email = req.email.strip().lower()
    if "@" not in email:
        raise HTTPException(status_code=422, detail="Invalid email address")
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=409, detail="Email already registered")

    user = User(
        name=req.name,
        email=email,
        password_hash=hash_password(req.password),
        role="admin" if email in ADMIN_EMAILS else "user",
    )
    db.add(user)
    db.commit()
    return _token_response(user)


@router.post("/login", response_model=TokenResponse)
def login(req: LoginRequest, request: Request, db: DBSession = Depends(get_db)):
    email = req.email.strip().lower()
    ip = request.client.host if request.client else "unknown"
    _check_rate_limit(db, email)

    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(req.password, user.password_hash):
        _log_attempt(db, email, False, ip)
        raise HTTPException(status_code=401, detail="Invalid email or password")

    _log_attempt(db, email, True, ip)
    return _token_response(user)


@router.post("/anonymous", response_model=TokenResponse, status_code=201)
def sign_in_anonymously(db: DBSession = Depends(get_db)):
    user = User(is_anonymous=True, role="user")
    db.add(user)
    db.commit()
    return _token_response(user)


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return UserResponse(
        user_id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        is_anonymous=user.is_anonymous,
    )
