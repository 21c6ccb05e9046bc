"""
SMSLY Length
============
Encoding detection, billed size and part splitting for SMS messages.
"""

__version__ = "0.1.0"

# Character sets
from smsly_length.charset import (
    CharacterClass,
    CharacterSet,
    GSM0338,
    GSM0338_BASIC,
    GSM0338_EXTENDED,
)

# Encoding
from smsly_length.encoding import (
    EncodingType,
    detect_encoding,
    character_cost,
    count_units,
)

# Segmentation
from smsly_length.segmentation import (
    SEGMENT_LIMITS,
    SegmentLimits,
    SizingResult,
    compute_sizing,
    calculate_segments,
    split_message,
    estimate_cost,
)

# Validation
from smsly_length.validation import (
    MAX_CONCATENATED_PARTS,
    ValidationResult,
    ValidationStatus,
    check_message_count,
    validate,
)

# Aggregate
from smsly_length.length import SmsLength
from smsly_length.models import SizingReport

# Errors
from smsly_length.exceptions import (
    SmsLengthError,
    TooManyPartsError,
    UnsupportedCharacterError,
    CharacterSetError,
    ConfigurationError,
)

# Configuration & logging
from smsly_length.config import LengthConfig
from smsly_length.logging_setup import setup_logging, setup_logging_from_config

__all__ = [
    # Character sets
    "CharacterClass",
    "CharacterSet",
    "GSM0338",
    "GSM0338_BASIC",
    "GSM0338_EXTENDED",
    # Encoding
    "EncodingType",
    "detect_encoding",
    "character_cost",
    "count_units",
    # Segmentation
    "SEGMENT_LIMITS",
    "SegmentLimits",
    "SizingResult",
    "compute_sizing",
    "calculate_segments",
    "split_message",
    "estimate_cost",
    # Validation
    "MAX_CONCATENATED_PARTS",
    "ValidationResult",
    "ValidationStatus",
    "check_message_count",
    "validate",
    # Aggregate
    "SmsLength",
    "SizingReport",
    # Errors
    "SmsLengthError",
    "TooManyPartsError",
    "UnsupportedCharacterError",
    "CharacterSetError",
    "ConfigurationError",
    # Configuration & logging
    "LengthConfig",
    "setup_logging",
    "setup_logging_from_config",
]
