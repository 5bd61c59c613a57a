from pydantic import BaseModel, EmailStr, Field
from datetime import datetime


class RegisterRequest(BaseModel):
    """Schema for creating a new account."""
    name: str = Field(..., min_length=1, max_length=255, description="User's name")
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Jane Creator",
                "email": "jane@example.com",
                "password": "MySecret123!",
            }
        }


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """Public view of a user, without the password hash."""
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    message: str
    user: UserResponse


class VerifyResponse(BaseModel):
    user: UserResponse
