"""UserHealthInfoId value object."""

from dataclasses import dataclass
from uuid import UUID, uuid4

from burnfit.domain.shared.errors import InvalidUserHealthInfoError

PRIMARY_USER_ID = "00000000-0000-4000-8000-000000000001"


@dataclass(frozen=True)
class UserHealthInfoId:
    """Unique identifier of a user health profile.

    Attributes:
        value: UUID value

    Example:
        >>> profile_id = UserHealthInfoId.generate()
        >>> UserHealthInfoId.from_string(str(profile_id)) == profile_id
        True
    """

    value: UUID

    @classmethod
    def generate(cls) -> "UserHealthInfoId":
        """Generate a new random (v4) identifier."""
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, value: str) -> "UserHealthInfoId":
        """Create from a UUID string.

        Raises:
            InvalidUserHealthInfoError: If value is blank or not a UUID
        """
        if not value or not value.strip():
            raise InvalidUserHealthInfoError("UserHealthInfoId cannot be empty")
        try:
            return cls(value=UUID(value.strip()))
        except ValueError as e:
            raise InvalidUserHealthInfoError(
                "UserHealthInfoId must be a valid UUID format"
            ) from e

    @classmethod
    def primary(cls) -> "UserHealthInfoId":
        """Fixed identifier for single-user installations."""
        return cls.from_string(PRIMARY_USER_ID)

    def __str__(self) -> str:
        return str(self.value)
