from datetime import datetime, timedelta, timezone

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from passlib.context import CryptContext

from app.config import Config
from app.errors import ErrorKind, ServiceError

pwd_context = CryptContext(schemes=["pbkdf2_sha256", "bcrypt_sha256", "bcrypt"], deprecated="auto")

def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password)

def create_access_token(claims: dict, expires_minutes: int = None) -> str:
    to_encode = dict(claims)
    minutes = expires_minutes if expires_minutes is not None else Config.ACCESS_TOKEN_EXPIRE_MINUTES
    to_encode["exp"] = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    return jwt.encode(to_encode, Config.SECRET_KEY, algorithm=Config.JWT_ALGORITHM)

def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, Config.SECRET_KEY, algorithms=[Config.JWT_ALGORITHM])
    except JWTError as e:
        raise ServiceError(ErrorKind.UNAUTHORIZED, "Invalid or expired token") from e

bearer_scheme = HTTPBearer(auto_error=False)

async def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme)) -> dict:
    """Claims of the bearer token: sub, username, name, role."""
    if credentials is None or not credentials.credentials:
        raise ServiceError(ErrorKind.UNAUTHORIZED, "Access token required")
    return decode_access_token(credentials.credentials)

async def admin_only(current_user: dict = Depends(get_current_user)) -> dict:
    if current_user.get("role") != "admin":
        raise ServiceError(ErrorKind.FORBIDDEN, "Admin access required")
    return current_user
