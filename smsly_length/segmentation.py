"""
Message Segmentation
====================
Sizing and splitting of messages into concatenated SMS parts.

Segment limits (units per part):
- GSM-7: 160 (single), 153 (concatenated)
- UCS-2: 70 (single), 67 (concatenated)

A two-unit character (7-bit escape sequence or UCS-2 surrogate pair) is
never split across parts. When it does not fit in what is left of the
current part it moves to the next one, and the unused unit is billed as
padding.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .charset import CharacterSet, GSM0338
from .config import DEFAULT_COST_PER_SEGMENT
from .encoding import EncodingType, character_cost, detect_encoding


@dataclass(frozen=True)
class SegmentLimits:
    """Unit capacity of a single message and of each concatenated part."""
    single_max: int
    multi_max: int


SEGMENT_LIMITS: Dict[EncodingType, SegmentLimits] = {
    EncodingType.GSM7: SegmentLimits(single_max=160, multi_max=153),
    EncodingType.UCS2: SegmentLimits(single_max=70, multi_max=67),
}


@dataclass(frozen=True)
class SizingResult:
    """Computed size of one message."""
    size: int
    message_count: int
    upper_breakpoint: int
    parts: Tuple[str, ...]


def compute_sizing(
    content: str,
    encoding: EncodingType,
    charset: CharacterSet = GSM0338,
) -> SizingResult:
    """
    Compute billed size, part count and part texts for a message.
    
    Args:
        content: Message content
        encoding: Encoding selected for the whole message
        charset: 7-bit character set used for unit costs
        
    Returns:
        SizingResult for the message
    """
    limits = SEGMENT_LIMITS[encoding]
    costs = [character_cost(char, encoding, charset) for char in content]
    raw_total = sum(costs)
    
    if raw_total <= limits.single_max:
        return SizingResult(
            size=raw_total,
            message_count=1,
            upper_breakpoint=limits.single_max,
            parts=(content,),
        )
    
    parts: List[str] = []
    buffer: List[str] = []
    running_total = 0
    
    for char, cost in zip(content, costs):
        if running_total + cost > limits.multi_max:
            # Close the part; the character opens the next one whole
            parts.append("".join(buffer))
            buffer = [char]
            running_total = cost
        else:
            buffer.append(char)
            running_total += cost
    
    parts.append("".join(buffer))
    message_count = len(parts)
    
    return SizingResult(
        size=limits.multi_max * (message_count - 1) + running_total,
        message_count=message_count,
        upper_breakpoint=limits.multi_max * message_count,
        parts=tuple(parts),
    )


def calculate_segments(
    text: str,
    charset: CharacterSet = GSM0338,
) -> Tuple[int, EncodingType, int]:
    """
    Calculate the number of SMS segments required.
    
    Args:
        text: Message content
        charset: 7-bit character set
        
    Returns:
        Tuple of (segments, encoding, size)
    """
    encoding = detect_encoding(text, charset)
    result = compute_sizing(text, encoding, charset)
    return result.message_count, encoding, result.size


def split_message(text: str, charset: CharacterSet = GSM0338) -> List[str]:
    """
    Split a message into the parts it will be sent as.
    
    Args:
        text: Message content
        charset: 7-bit character set
        
    Returns:
        List of message parts, in sending order
    """
    encoding = detect_encoding(text, charset)
    return list(compute_sizing(text, encoding, charset).parts)


def estimate_cost(
    text: str,
    cost_per_segment: float = DEFAULT_COST_PER_SEGMENT,
    charset: CharacterSet = GSM0338,
) -> float:
    """
    Estimate the cost to send a message.
    
    Args:
        text: Message content
        cost_per_segment: Cost per SMS segment
        charset: 7-bit character set
        
    Returns:
        Estimated cost
    """
    segments, _, _ = calculate_segments(text, charset)
    return segments * cost_per_segment
