from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.database import get_db
from app.errors import ErrorKind, ServiceError
from app.models.form_master import FormMaster
from app.models.user import User
from app.schemas.auth_schema import CurrentUser, LoginRequest, TokenResponse
from app.security import create_access_token, get_current_user, verify_password

router = APIRouter()

@router.post("/login", response_model=TokenResponse)
async def login(user_in: LoginRequest, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(User).where(User.username == user_in.username))
    user = result.scalar_one_or_none()
    if user and verify_password(user_in.password, user.password_hash):
        claims = {"sub": str(user.id), "username": user.username, "name": user.name, "role": user.role}
    else:
        # Form masters sign in with their email
        result = await db.execute(select(FormMaster).where(FormMaster.email == user_in.username))
        form_master = result.scalar_one_or_none()
        if not form_master or not verify_password(user_in.password, form_master.password_hash):
            raise ServiceError(ErrorKind.UNAUTHORIZED, "Invalid username or password")
        claims = {"sub": str(form_master.id), "username": form_master.email, "name": form_master.name, "role": "form_master"}

    return TokenResponse(access_token=create_access_token(claims), user=claims)

@router.get("/me", response_model=CurrentUser)
async def me(current_user: dict = Depends(get_current_user)):
    return current_user
