"""
Message Validation
==================
Checks a computed message against the concatenation ceiling.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

from .exceptions import TooManyPartsError

if TYPE_CHECKING:
    from .length import SmsLength

# Concatenated SMS headers carry the part total in a single octet
MAX_CONCATENATED_PARTS = 255


class ValidationStatus(str, Enum):
    """Validation outcome."""
    OK = "ok"
    TOO_MANY_PARTS = "too_many_parts"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a message count check."""
    status: ValidationStatus
    message_count: int
    max_message_count: int = MAX_CONCATENATED_PARTS
    message: Optional[str] = None
    
    @property
    def ok(self) -> bool:
        return self.status == ValidationStatus.OK
    
    def raise_for_status(self) -> None:
        """Raise TooManyPartsError if the check failed."""
        if not self.ok:
            raise TooManyPartsError(self.message_count, self.max_message_count)


def check_message_count(
    message_count: int,
    max_message_count: int = MAX_CONCATENATED_PARTS,
) -> ValidationResult:
    """
    Check a part count against the ceiling without raising.
    
    Args:
        message_count: Number of parts the message needs
        max_message_count: Highest part count that can be sent
        
    Returns:
        ValidationResult with OK or TOO_MANY_PARTS
    """
    if message_count > max_message_count:
        return ValidationResult(
            status=ValidationStatus.TOO_MANY_PARTS,
            message_count=message_count,
            max_message_count=max_message_count,
            message=f"Message count cannot exceed {max_message_count}",
        )
    return ValidationResult(
        status=ValidationStatus.OK,
        message_count=message_count,
        max_message_count=max_message_count,
    )


def validate(sms_length: "SmsLength") -> bool:
    """
    Validate a computed message.
    
    Returns:
        True when the message can be sent
        
    Raises:
        TooManyPartsError: message needs more than 255 parts
    """
    check_message_count(sms_length.message_count).raise_for_status()
    return True
