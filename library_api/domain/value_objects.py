"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """
    A single failed validation rule for a candidate Book.

    A validation run may produce several of these; they are always
    reported together.
    """

    property_name: str
    """PascalCase name of the offending field (e.g. 'Isbn', 'PageCount')"""

    error_message: str
    """Human-readable description of the failure"""

    def __post_init__(self) -> None:
        """Validate error constraints."""
        if not self.property_name:
            raise ValueError("property_name cannot be empty")


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    """
    Identity produced by a successful API key check.

    The shared secret does not identify a caller, so every authenticated
    request receives the same principal.
    """

    name: str = "api-key-client"
    scheme: str = "ApiKey"
