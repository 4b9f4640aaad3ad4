from pydantic import BaseModel
from typing import Optional

class LoginRequest(BaseModel):
    username: str # Admin username, or a form master's email
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: dict

class CurrentUser(BaseModel):
    sub: str
    username: str
    name: Optional[str] = None
    role: str
