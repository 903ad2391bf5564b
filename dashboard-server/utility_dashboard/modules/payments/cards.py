"""Card brand detection and checksum validation."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CardBrand:
    name: str
    pattern: re.Pattern[str]
    lengths: tuple[int, ...]
    cvc_lengths: tuple[int, ...] = (3,)
    luhn: bool = True


# First match wins, so narrower prefixes precede the broad ones (maestro before
# mastercard, visaelectron before visa).
CARD_BRANDS: tuple[CardBrand, ...] = (
    CardBrand("amex", re.compile(r"^3[47]"), (15,), cvc_lengths=(4,)),
    CardBrand("dankort", re.compile(r"^5019"), (16,)),
    CardBrand("dinersclub", re.compile(r"^(36|38|30[0-5])"), (14,)),
    CardBrand("discover", re.compile(r"^(6011|65|64[4-9]|622)"), (16,)),
    CardBrand("jcb", re.compile(r"^35"), (16,)),
    CardBrand("laser", re.compile(r"^(6706|6771|6709)"), tuple(range(16, 20))),
    CardBrand(
        "maestro",
        re.compile(r"^(5018|5020|5038|6304|6703|6708|6759|676[1-3])"),
        tuple(range(12, 20)),
    ),
    CardBrand(
        "mastercard",
        re.compile(r"^(5[1-5]|677189)|^(222[1-9]|2[3-6][0-9]{2}|27[0-1][0-9]|2720)"),
        (16,),
    ),
    CardBrand("unionpay", re.compile(r"^62"), tuple(range(16, 20)), luhn=False),
    CardBrand("visaelectron", re.compile(r"^4(026|17500|405|508|844|91[37])"), (16,)),
    CardBrand("visa", re.compile(r"^4"), (13, 16, 19)),
)

_SEPARATORS = re.compile(r"[\s-]+")
_DIGITS = re.compile(r"[0-9]+")


def normalize_card_number(value: str) -> str:
    """Drop the spaces and dashes users type between digit groups."""
    return _SEPARATORS.sub("", value)


def detect_brand(card_number: str) -> CardBrand | None:
    number = normalize_card_number(card_number)
    for brand in CARD_BRANDS:
        if brand.pattern.match(number):
            return brand
    return None


def luhn_checksum_valid(digits: str) -> bool:
    total = 0
    for index, char in enumerate(reversed(digits)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_valid_card_number(card_number: str) -> bool:
    number = normalize_card_number(card_number)
    if not _DIGITS.fullmatch(number):
        return False
    brand = detect_brand(number)
    if brand is None:
        return False
    if len(number) not in brand.lengths:
        return False
    return not brand.luhn or luhn_checksum_valid(number)


__all__ = [
    "CARD_BRANDS",
    "CardBrand",
    "detect_brand",
    "is_valid_card_number",
    "luhn_checksum_valid",
    "normalize_card_number",
]
