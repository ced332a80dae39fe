"""
Value objects produced by the credential validator
(kept apart from the persisted User models).
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

SUCCESS_MESSAGE = "User created successfully"


class InputError(str, Enum):
    """Closed set of rejection codes; the values are what the client sees."""

    WRONG_EMAIL = "Wrong email"
    WRONG_PASSWORD = "Wrong password"
    INCORRECT_DATA = "Incorrect data"


class Credentials(BaseModel):
    email: str = ""
    password: str = ""


class Verdict(BaseModel):
    """
    Outcome of one validation call.

    Exactly one of `message` / `error` is set and `is_validated` mirrors
    which one. Serialized with the camelCase `isValidated` key.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    is_validated: bool = Field(..., alias="isValidated")
    message: str | None = None
    error: InputError | None = None

    @model_validator(mode="after")
    def _one_outcome(self) -> "Verdict":
        if (self.message is None) == (self.error is None):
            raise ValueError("exactly one of message/error must be set")
        if self.is_validated != (self.message is not None):
            raise ValueError("is_validated must be true iff message is set")
        return self

    @classmethod
    def success(cls) -> "Verdict":
        return cls(is_validated=True, message=SUCCESS_MESSAGE)

    @classmethod
    def failure(cls, error: InputError) -> "Verdict":
        return cls(is_validated=False, error=error)
