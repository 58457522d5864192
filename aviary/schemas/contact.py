"""Contact-form schemas."""


from pydantic import EmailStr, Field

from aviary.schemas.common import CamelModel

class ContactMessage(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=50)
    message: str = Field(min_length=1, max_length=5000)

class ContactReceipt(CamelModel):
    sent: bool = True
    detail: str = "Email was sent successfully"
