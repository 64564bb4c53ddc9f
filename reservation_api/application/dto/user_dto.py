# Standard library imports
from typing import Iterable, List, Optional

# External package imports
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Local application imports
from ...domain.models.user import CreateUserParams, UpdateUserParams, User


class _CamelModel(BaseModel):
    """Base for DTOs exchanged as camelCase JSON"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(_CamelModel):
    """DTO for user creation request. Field rules are enforced by UserValidator."""
    first_name: str
    last_name: str
    email: str
    password: str

    def to_params(self) -> CreateUserParams:
        return CreateUserParams(
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            password=self.password,
        )


class UpdateUserRequest(_CamelModel):
    """DTO for partial user update; omitted or null fields are left unchanged"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    def to_params(self) -> UpdateUserParams:
        return UpdateUserParams(first_name=self.first_name, last_name=self.last_name)


class UserResponse(_CamelModel):
    """DTO for user response (no password)"""
    id: str
    first_name: str
    last_name: str
    email: str


def to_external(user: User) -> UserResponse:
    """
    Project a User onto its external representation.

    Every path that hands a User to an outside caller goes through here.
    UserResponse has no credential field, so the hash cannot leak.
    """
    return UserResponse(
        id=user.id or "",
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
    )


def to_external_list(users: Iterable[User]) -> List[UserResponse]:
    return [to_external(user) for user in users]
