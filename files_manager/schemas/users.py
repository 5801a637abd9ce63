from pydantic import BaseModel, ConfigDict


class UserRegisterRequest(BaseModel):
    # Presence is checked by the registration service so the error
    # messages stay "Missing email" / "Missing password"
    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str


class TokenResponse(BaseModel):
    token: str
