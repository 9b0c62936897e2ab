from pydantic import BaseModel, Field

from learning_service.model.enums import UserRole


# =============================
#   Request Schemas
# =============================
class RegisterRequest(BaseModel):
    """Request schema for creating an account"""

    email: str = Field(..., min_length=3, description="Login email, case-insensitive")
    password: str = Field(..., min_length=1, description="Plain-text password")
    role: UserRole = Field(..., description="instructor or student")


class LoginRequest(BaseModel):
    """Request schema for signing in"""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


# =============================
#   Response Schemas
# =============================
class UserResponse(BaseModel):
    """Public view of an account"""

    id: int
    email: str
    role: UserRole


class AuthResponse(BaseModel):
    """Account plus a bearer token"""

    user: UserResponse
    token: str


class CurrentUser(BaseModel):
    """Verified caller identity passed explicitly into services"""

    id: int
    email: str
    role: UserRole

