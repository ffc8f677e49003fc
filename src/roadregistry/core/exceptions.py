"""RoadRegistry exception hierarchy."""

from __future__ import annotations


class RoadRegistryError(Exception):
    """Base exception for all RoadRegistry errors."""


class ValidationError(RoadRegistryError):
    """A field failed its grammar (identity, address, date, names)."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Invalid {field}: {message}")


class RuleViolation(RoadRegistryError):
    """A structurally valid change breaks an update-eligibility rule."""


class AddressChangeNotAllowed(RuleViolation):
    """Address changes are not allowed below the minimum age."""

    def __init__(self, identity: str, age: int, min_age: int) -> None:
        self.identity = identity
        self.age = age
        self.min_age = min_age
        super().__init__(f"{identity}: address cannot change at age {age} (minimum {min_age})")


class BirthdateChangeNotAtomic(RuleViolation):
    """A birthdate change was combined with other field changes."""

    def __init__(self, identity: str, changed: list[str]) -> None:
        self.identity = identity
        self.changed = changed
        super().__init__(
            f"{identity}: birthdate must be the only change, also changed {', '.join(changed)}"
        )


class IdentityImmutable(RuleViolation):
    """Identities with an even leading digit cannot be changed."""

    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(f"{identity}: identity with even leading digit is immutable")


class DuplicateIdentity(RuleViolation):
    """The identity already belongs to another person."""

    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(f"{identity}: identity already registered")


class NotFoundError(RoadRegistryError):
    """No person record exists for the identity."""

    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(f"No person registered with identity {identity!r}")


class StorageError(RoadRegistryError):
    """Reading or writing a dataset failed."""


class CorruptRecordError(StorageError):
    """A stored record holds a value that no longer parses."""

    def __init__(self, identity: str, field: str, value: str) -> None:
        self.identity = identity
        self.field = field
        self.value = value
        super().__init__(f"Stored {field} for {identity} is corrupt: {value!r}")
