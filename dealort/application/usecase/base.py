"""Base use case and shared request/response models."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from dealort.domain.model import User


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class RPCModel(BaseModel):
    """Model exchanged over RPC: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserSummary(RPCModel):
    """Public projection of a user embedded in other payloads."""

    id: str
    name: str
    username: str | None = None
    display_username: str | None = None
    image: str | None = None

    @classmethod
    def from_user(cls, user: User | None) -> "UserSummary | None":
        if user is None:
            return None
        return cls(
            id=user.id,
            name=user.name,
            username=user.username,
            display_username=user.display_username,
            image=user.image,
        )


class SuccessResponse(RPCModel):
    success: bool = True


class CreatedResponse(RPCModel):
    id: str
    success: bool = True
