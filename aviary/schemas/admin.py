"""Admin account and login schemas."""


from datetime import datetime

from pydantic import Field, model_validator

from aviary.schemas.common import CamelModel

class LoginRequest(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)

class AdminSession(CamelModel):
    """What the signed session cookie carries for a logged-in admin."""

    admin_id: str
    username: str

class AdminRegister(CamelModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)
    confirm_password: str

    @model_validator(mode="after")
    def _passwords_match(self) -> "AdminRegister":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self

class AdminUpdate(AdminRegister):
    """Updates replace both username and password, as on registration."""

class AdminOut(CamelModel):
    id: str
    username: str
    added_by: str | None = None
    updated_by: str | None = None
    created_at: datetime
    updated_at: datetime
