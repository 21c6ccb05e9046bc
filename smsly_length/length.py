"""
SMS Length
==========
Size of a single message: encoding, billed units, part count and parts.
"""

from typing import Dict

import structlog

from .charset import CharacterSet, GSM0338
from .encoding import EncodingType, detect_encoding
from .models import SizingReport
from .segmentation import SizingResult, compute_sizing
from .validation import ValidationResult, check_message_count, validate

logger = structlog.get_logger(__name__)


class SmsLength:
    """
    Encoding, size and parts of an SMS message.
    
    Everything is computed once at construction; instances are read-only
    and can be shared between threads.
    
    Usage:
        length = SmsLength("Hello €")
        length.encoding        # EncodingType.GSM7
        length.size            # 8
        length.message_count   # 1
        length.validate()      # True, or raises TooManyPartsError
    """
    
    def __init__(self, content: str, charset: CharacterSet = GSM0338):
        """
        Args:
            content: Message text, already decoded to code points
            charset: 7-bit character set used for encoding detection
        """
        self._content = content
        self._encoding = detect_encoding(content, charset)
        self._sizing: SizingResult = compute_sizing(content, self._encoding, charset)
        
        logger.debug(
            "sms_length.computed",
            encoding=self._encoding.value,
            size=self._sizing.size,
            message_count=self._sizing.message_count,
        )
    
    @property
    def content(self) -> str:
        return self._content
    
    @property
    def encoding(self) -> EncodingType:
        return self._encoding
    
    @property
    def size(self) -> int:
        """Billed units, including padding left in non-final parts."""
        return self._sizing.size
    
    @property
    def message_count(self) -> int:
        return self._sizing.message_count
    
    @property
    def upper_breakpoint(self) -> int:
        """Highest unit total that still fits in message_count parts."""
        return self._sizing.upper_breakpoint
    
    @property
    def parts(self) -> Dict[int, str]:
        """Message parts keyed by 1-based part number."""
        return {index: part for index, part in enumerate(self._sizing.parts, start=1)}
    
    def check(self) -> ValidationResult:
        """Check the part count without raising."""
        return check_message_count(self.message_count)
    
    @property
    def is_valid(self) -> bool:
        return self.check().ok
    
    def validate(self) -> bool:
        """
        Validate the message before sending.
        
        Returns:
            True
            
        Raises:
            TooManyPartsError: message needs more than 255 parts
        """
        return validate(self)
    
    def to_report(self) -> SizingReport:
        return SizingReport(
            encoding=self.encoding,
            size=self.size,
            message_count=self.message_count,
            upper_breakpoint=self.upper_breakpoint,
            parts=list(self._sizing.parts),
            valid=self.is_valid,
        )
    
    def __repr__(self) -> str:
        return (
            f"SmsLength(encoding={self.encoding.value!r}, size={self.size}, "
            f"message_count={self.message_count})"
        )
