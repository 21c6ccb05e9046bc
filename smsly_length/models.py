"""
Report Models
=============
Serialisable views of a computed message size, for API responses.
"""

from typing import List

from pydantic import BaseModel

from .encoding import EncodingType


class SizingReport(BaseModel):
    encoding: EncodingType
    size: int
    message_count: int
    upper_breakpoint: int
    parts: List[str]
    valid: bool
