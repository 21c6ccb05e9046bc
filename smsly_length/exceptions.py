"""
SMS Length Exceptions
=====================
Exception classes raised by the sizing engine.
"""

from typing import Optional


class SmsLengthError(Exception):
    """Base exception for all SMS length errors."""
    pass


class TooManyPartsError(SmsLengthError, ValueError):
    """Raised when a message needs more concatenated parts than allowed."""
    
    def __init__(self, message_count: int, max_message_count: int):
        self.message_count = message_count
        self.max_message_count = max_message_count
        super().__init__(f"Message count cannot exceed {max_message_count}")


class UnsupportedCharacterError(SmsLengthError, ValueError):
    """Raised when a character cannot be represented in the requested encoding."""
    
    def __init__(self, char: str, encoding: Optional[str] = None):
        self.char = char
        self.encoding = encoding
        super().__init__(
            f"Character U+{ord(char):04X} is not representable in {encoding}"
        )


class CharacterSetError(SmsLengthError, ValueError):
    """Raised when a character set definition is inconsistent."""
    pass


class ConfigurationError(SmsLengthError, ValueError):
    """Raised when a configuration value is invalid."""
    pass
