from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Wrapper shared by every response, success or failure."""

    success: bool = True
    data: T | None = None
    message: str | None = None


def ok(data: T, message: str | None = None) -> Envelope[T]:
    return Envelope(success=True, data=data, message=message)


def failure(message: str) -> dict:
    return Envelope(success=False, message=message).model_dump()
