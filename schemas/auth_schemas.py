"""
RecipeGen Authentication Schemas
Pydantic models for authentication and profile requests and responses
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCreate(BaseModel):
    """Schema for user registration; emptiness is checked by AuthService"""
    email: str = Field(default="", max_length=255)
    password: str = Field(default="", max_length=128)
    name: str = Field(default="", max_length=255)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower()


class UserLogin(BaseModel):
    """Schema for user login; an empty password is rejected as bad credentials"""
    email: str = ""
    password: str = ""

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower()


class User(BaseModel):
    """Public user record; the password hash is stripped"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    """Schema for register/login responses"""
    token: str
    user: User


class ProfileUpdate(BaseModel):
    """Schema for profile update"""
    name: str = ""


class ProfileResponse(BaseModel):
    name: str
