from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

EMAIL_REGX = r"^[^@]+@[^@]+\.[^@]+$"


# Schema for registering a user
class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., pattern=EMAIL_REGX)
    password: str = Field(..., min_length=1)

# Schema for login (JSON body)
class UserLogin(BaseModel):
    email: str = Field(..., pattern=EMAIL_REGX)
    password: str

# Schema for returning user (without password)
class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class LoginResponse(BaseModel):
    message: str
    access_token: str
    token_type: str
    user_id: int
