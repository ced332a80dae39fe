from datetime import datetime
from pydantic import BaseModel, Field

class UserBase(BaseModel):
    name: str = Field(..., max_length=80)
    about: str = Field("", max_length=200)
    # plain str – the structural e-mail check lives in services/validation.py
    # so a bad address yields "Wrong email" instead of a 422
    email: str
    avatar: str = ""

class UserCreate(UserBase):
    password: str

class UserOut(UserBase):
    id: str
    slug: str
    url: str
    created_at: datetime

class UserCreated(BaseModel):
    message: str
    data: UserOut
