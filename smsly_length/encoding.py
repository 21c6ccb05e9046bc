"""
Encoding Detection
==================
Encoding selection and per-character unit costs.
"""

from enum import Enum
from typing import Optional

from .charset import CharacterSet, CharacterClass, GSM0338
from .exceptions import UnsupportedCharacterError

# First code point that needs a UTF-16 surrogate pair
SURROGATE_PAIR_START = 0x10000


class EncodingType(str, Enum):
    """SMS encoding types."""
    GSM7 = "7-bit"
    UCS2 = "ucs-2"


def detect_encoding(text: str, charset: CharacterSet = GSM0338) -> EncodingType:
    """
    Detect the required encoding for a message.
    
    The decision is global: one unsupported character moves the whole
    message to UCS-2.
    
    Args:
        text: Message content
        charset: 7-bit character set to test membership against
        
    Returns:
        EncodingType.GSM7 or EncodingType.UCS2
    """
    if charset.supports(text):
        return EncodingType.GSM7
    return EncodingType.UCS2


def character_cost(
    char: str,
    encoding: EncodingType,
    charset: CharacterSet = GSM0338,
) -> int:
    """
    Number of transmission units a single character occupies.
    
    Args:
        char: A single code point
        encoding: Encoding already chosen for the whole message
        charset: 7-bit character set
        
    Returns:
        1 or 2
        
    Raises:
        UnsupportedCharacterError: char has no 7-bit representation and
            encoding is GSM7
    """
    if encoding == EncodingType.UCS2:
        return 2 if ord(char) >= SURROGATE_PAIR_START else 1
    
    membership = charset.classify(char)
    if membership == CharacterClass.BASIC:
        return 1
    if membership == CharacterClass.EXTENDED:
        return 2
    raise UnsupportedCharacterError(char, encoding.value)


def count_units(
    text: str,
    encoding: Optional[EncodingType] = None,
    charset: CharacterSet = GSM0338,
) -> int:
    """
    Count the raw transmission units of a message.
    
    Extended 7-bit characters and UCS-2 surrogate pairs count as 2.
    The encoding is detected when not given.
    """
    if encoding is None:
        encoding = detect_encoding(text, charset)
    return sum(character_cost(char, encoding, charset) for char in text)
