from __future__ import annotations
import math
import re
from typing import Callable, NamedTuple, Optional
from smart_shopping_list.categorizer import categorize_ingredient
from smart_shopping_list.models import ParsedIngredient

DEFAULT_UNIT = "piece"
TO_TASTE = "to taste"

UNIT_SYNONYMS: dict[str, str] = {
    "cup": "cup", "cups": "cup",
    "tablespoon": "tbsp", "tablespoons": "tbsp", "tbsp": "tbsp", "tbsps": "tbsp", "tbs": "tbsp",
    "teaspoon": "tsp", "teaspoons": "tsp", "tsp": "tsp", "tsps": "tsp",
    "g": "g", "gr": "g", "gram": "g", "grams": "g", "gramme": "g", "grammes": "g",
    "kg": "kg", "kgs": "kg", "kilo": "kg", "kilos": "kg", "kilogram": "kg", "kilograms": "kg",
    "ml": "ml", "milliliter": "ml", "milliliters": "ml", "millilitre": "ml", "millilitres": "ml",
    "l": "l", "liter": "l", "liters": "l", "litre": "l", "litres": "l",
    "oz": "oz", "ounce": "oz", "ounces": "oz",
    "lb": "lb", "lbs": "lb", "pound": "lb", "pounds": "lb",
    "piece": "piece", "pieces": "piece", "pc": "piece", "pcs": "piece",
    "can": "can", "cans": "can", "tin": "can", "tins": "can",
    "packet": "packet", "packets": "packet", "package": "packet", "packages": "packet",
    "pack": "packet", "packs": "packet", "pkg": "packet",
    "slice": "slice", "slices": "slice",
    "clove": "clove", "cloves": "clove",
}

SIZE_DESCRIPTORS = ("extra large", "extra-large", "small", "medium", "large", "big", "jumbo", "whole")

NAME_DESCRIPTORS = (
    "chopped", "diced", "minced", "sliced", "grated", "shredded", "crushed", "peeled", "cubed",
    "fresh", "freshly", "dried", "cooked", "raw", "boneless", "skinless",
    "finely", "roughly", "thinly", "coarsely",
)

UNICODE_FRACTIONS = {
    "½": "1/2", "⅓": "1/3", "⅔": "2/3", "¼": "1/4", "¾": "3/4",
    "⅕": "1/5", "⅛": "1/8", "⅜": "3/8", "⅝": "5/8", "⅞": "7/8",
}

_NUMBER = r"(?:\d+(?:\.\d+)?|\.\d+)"
_QUANTITY = (
    rf"(?P<quantity>{_NUMBER}\s+\d+/\d+"
    rf"|\d+/\d+"
    rf"|{_NUMBER}(?:\s*[-–]\s*{_NUMBER}|\s+to\s+{_NUMBER})?)"
)
_UNITS = "|".join(re.escape(u) for u in sorted(UNIT_SYNONYMS, key=len, reverse=True))
_SIZES = "|".join(re.escape(s) for s in SIZE_DESCRIPTORS)

_EXPLICIT_UNIT_RE = re.compile(
    rf"^{_QUANTITY}\s+(?P<unit>{_UNITS})\.?\s+(?:of\s+)?(?P<name>.+)$", re.IGNORECASE
)
_GLUED_UNIT_RE = re.compile(rf"^{_QUANTITY}(?P<unit>[a-z]+)\.?\s+(?P<name>.+)$", re.IGNORECASE)
_SIZE_RE = re.compile(rf"^{_QUANTITY}\s+(?:{_SIZES})\s+(?P<name>.+)$", re.IGNORECASE)
_BARE_RE = re.compile(rf"^{_QUANTITY}\s+(?P<name>.+)$", re.IGNORECASE)
_QUANTITY_ONLY_RE = re.compile(rf"^{_QUANTITY}$", re.IGNORECASE)

_RANGE_SPLIT_RE = re.compile(r"\s*[-–]\s*|\s+to\s+", re.IGNORECASE)
_TO_TASTE_RE = re.compile(r"\bto\s+taste\b", re.IGNORECASE)
_TO_TASTE_STRIP_RE = re.compile(r"[\s,]*(?:\bor\s+)?\bto\s+taste\b", re.IGNORECASE)
_UNICODE_FRACTION_RE = re.compile("[" + "".join(UNICODE_FRACTIONS) + "]")
_PARENTHETICAL_RE = re.compile(r"\([^)]*\)")
_DESCRIPTOR_RE = re.compile(
    r"(?<![\w-])(?:" + "|".join(NAME_DESCRIPTORS) + r")(?![\w-])", re.IGNORECASE
)
_DANGLING_CONNECTOR_RE = re.compile(r"(?:^|[\s,;:]+)(?:and|or)[\s,;:.]*$", re.IGNORECASE)
_EDGE_PUNCTUATION = " ,;:.-*"


class _Match(NamedTuple):
    quantity: str
    unit: str
    name: str


def _match_quantity_only(text: str) -> Optional[_Match]:
    m = _QUANTITY_ONLY_RE.match(text)
    if not m:
        return None
    return _Match(m.group("quantity"), DEFAULT_UNIT, "")


def _match_explicit_unit(text: str) -> Optional[_Match]:
    m = _EXPLICIT_UNIT_RE.match(text)
    if not m:
        return None
    return _Match(m.group("quantity"), normalize_unit(m.group("unit")), m.group("name"))


def _match_glued_unit(text: str) -> Optional[_Match]:
    m = _GLUED_UNIT_RE.match(text)
    if not m:
        return None
    return _Match(m.group("quantity"), normalize_unit(m.group("unit")), m.group("name"))


def _match_size_descriptor(text: str) -> Optional[_Match]:
    m = _SIZE_RE.match(text)
    if not m:
        return None
    return _Match(m.group("quantity"), DEFAULT_UNIT, m.group("name"))


def _match_bare_quantity(text: str) -> Optional[_Match]:
    m = _BARE_RE.match(text)
    if not m:
        return None
    return _Match(m.group("quantity"), DEFAULT_UNIT, m.group("name"))


# Order is significant: an unambiguous unit beats the generic fallbacks, and a
# line that is nothing but a quantity must not lend half a mixed number to the name.
MATCHERS: tuple[Callable[[str], Optional[_Match]], ...] = (
    _match_quantity_only,
    _match_explicit_unit,
    _match_glued_unit,
    _match_size_descriptor,
    _match_bare_quantity,
)


def normalize_unit(unit: str) -> str:
    token = unit.strip().lower()
    return UNIT_SYNONYMS.get(token, token)


def parse_quantity(token: str) -> Optional[float]:
    """Convert a quantity token to a number.

    Accepts integers, decimals, fractions ("1/2"), mixed numbers ("1 1/2")
    and ranges ("2-3", "2 to 3"), which resolve to the mean of their
    endpoints. Returns None when the token is not a usable quantity.
    """
    parts = _RANGE_SPLIT_RE.split(token.strip())
    if len(parts) == 2:
        low, high = _parse_single(parts[0]), _parse_single(parts[1])
        if low is None or high is None:
            return None
        return (low + high) / 2
    if len(parts) != 1:
        return None
    return _parse_single(parts[0])


def _parse_single(token: str) -> Optional[float]:
    pieces = token.split()
    if not pieces or len(pieces) > 2:
        return None
    total = 0.0
    for piece in pieces:
        numerator, slash, denominator = piece.partition("/")
        try:
            value = float(numerator) / float(denominator) if slash else float(piece)
        except (ValueError, ZeroDivisionError):
            return None
        if not math.isfinite(value):
            return None
        total += value
    return total


def clean_ingredient_name(name: str) -> str:
    cleaned = _DESCRIPTOR_RE.sub(" ", name)
    cleaned = re.sub(r"\s+", " ", cleaned)
    cleaned = re.sub(r"\s+([,;:])", r"\1", cleaned)
    cleaned = re.sub(r"([,;:])(?:\s*[,;:])+", r"\1", cleaned)
    previous = None
    while cleaned != previous:
        previous = cleaned
        cleaned = _DANGLING_CONNECTOR_RE.sub("", cleaned.strip(_EDGE_PUNCTUATION))
    return cleaned


def _prepare(line: str) -> str:
    text = _UNICODE_FRACTION_RE.sub(lambda m: " " + UNICODE_FRACTIONS[m.group()], line)
    text = _PARENTHETICAL_RE.sub(" ", text)
    return re.sub(r"\s+", " ", text).strip()


def _build(name: str, quantity: Optional[float], unit: str) -> ParsedIngredient:
    if quantity is None or quantity <= 0:
        quantity = 1.0
    return ParsedIngredient(
        name=name, quantity=quantity, unit=unit, category=categorize_ingredient(name)
    )


def parse_ingredient(line: str) -> ParsedIngredient:
    """Parse one free-text ingredient line into name, quantity, unit and category.

    Never raises on odd input: a line without a recognisable quantity comes
    back as one "piece" of the cleaned line.
    """
    text = _prepare(line)

    if _TO_TASTE_RE.search(text):
        name = clean_ingredient_name(_TO_TASTE_STRIP_RE.sub("", text))
        return _build(name, 1.0, TO_TASTE)

    for matcher in MATCHERS:
        match = matcher(text)
        if match is not None:
            return _build(clean_ingredient_name(match.name), parse_quantity(match.quantity), match.unit)

    return _build(clean_ingredient_name(text), None, DEFAULT_UNIT)
