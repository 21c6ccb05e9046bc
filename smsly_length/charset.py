"""
Character Sets
==============
Membership tables for the GSM 03.38 7-bit alphabet.

A character set is two disjoint tables: *basic* characters cost one septet,
*extended* characters need the escape marker plus the character (two septets).
Anything else is unsupported in 7-bit mode.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable

from .exceptions import CharacterSetError


class CharacterClass(str, Enum):
    """Membership of a character within a 7-bit character set."""
    BASIC = "basic"
    EXTENDED = "extended"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class CharacterSet:
    """Immutable pair of basic/extended membership tables."""
    basic: FrozenSet[str]
    extended: FrozenSet[str]
    
    def __post_init__(self):
        overlap = self.basic & self.extended
        if overlap:
            raise CharacterSetError(
                f"Basic and extended tables overlap: {''.join(sorted(overlap))!r}"
            )
    
    @classmethod
    def from_strings(cls, basic: Iterable[str], extended: Iterable[str]) -> "CharacterSet":
        """Build a character set from any iterables of single characters."""
        return cls(basic=frozenset(basic), extended=frozenset(extended))
    
    def classify(self, char: str) -> CharacterClass:
        if char in self.basic:
            return CharacterClass.BASIC
        if char in self.extended:
            return CharacterClass.EXTENDED
        return CharacterClass.UNSUPPORTED
    
    def supports(self, text: str) -> bool:
        """Return True if every character of text is basic or extended."""
        for char in text:
            if char not in self.basic and char not in self.extended:
                return False
        return True


# GSM 03.38 default alphabet, laid out in table columns.
# 0x1B is left out: it is the escape to the extension table.
GSM0338_BASIC = (
    "@" "Δ" " " "0" "¡" "P" "¿" "p"
    "£" "_" "!" "1" "A" "Q" "a" "q"
    "$" "Φ" '"' "2" "B" "R" "b" "r"
    "¥" "Γ" "#" "3" "C" "S" "c" "s"
    "è" "Λ" "¤" "4" "D" "T" "d" "t"
    "é" "Ω" "%" "5" "E" "U" "e" "u"
    "ù" "Π" "&" "6" "F" "V" "f" "v"
    "ì" "Ψ" "'" "7" "G" "W" "g" "w"
    "ò" "Σ" "(" "8" "H" "X" "h" "x"
    "Ç" "Θ" ")" "9" "I" "Y" "i" "y"
    "\n" "Ξ" "*" ":" "J" "Z" "j" "z"
    "Ø"      "+" ";" "K" "Ä" "k" "ä"
    "ø" "Æ" "," "<" "L" "Ö" "l" "ö"
    "\r" "æ" "-" "=" "M" "Ñ" "m" "ñ"
    "Å" "ß" "." ">" "N" "Ü" "n" "ü"
    "å" "É" "/" "?" "O" "§" "o" "à"
)

# GSM 03.38 extension table (each costs two septets)
GSM0338_EXTENDED = "|^€{}[~]\\"

GSM0338 = CharacterSet.from_strings(GSM0338_BASIC, GSM0338_EXTENDED)
