"""
LexSite Backend: Court Fee Engine
===================================

What:  Ad valorem court-fee calculation over the published slab schedule,
       plus the amount-in-words and Indian currency display formatters.
How:   The schedule is a table of Slab records; compute_fee() finds the slab
       a claim value falls into and applies that slab's rule. Everything is
       Decimal arithmetic, quantized to paise with ROUND_HALF_UP, in a local
       context sized to the amount so no finite claim overflows precision.
Who:   Called by FeeService (calculator endpoint) and directly by tests.
When:  Once per calculation request. No state, no I/O.

Slab rules:
    Slabs 1-3 charge over the WHOLE claim value:
        fee = ceil(v / unit) * amount
    Slabs 4-9 carry a base and charge over the excess above the lower bound:
        fee = base + ceil((v - lower) / unit) * amount

    Partial units are always charged as a full unit. The jump at 500 -> 501
    (50.00 -> 76.50) comes from slab 3 applying to the whole value and is
    part of the published schedule.

Indian grouping:
    1,00,00,000 = one crore (10^7)
    1,00,000    = one lakh  (10^5)
"""

from dataclasses import dataclass
from decimal import (
    ROUND_CEILING,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    getcontext,
    localcontext,
)
from enum import Enum
from typing import List, Optional, Sequence, Union

Number = Union[int, float, str, Decimal]

PAISE = Decimal("0.01")
ZERO = Decimal("0.00")


# ══════════════════════════════════════════════════════════════════════════
# Schedule
# ══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Slab:
    """
    One row of the ad valorem schedule.

    Attributes:
        lower:  Exclusive lower bound of the claim range
        upper:  Inclusive upper bound; None for the open-ended last slab
        unit:   Size of one chargeable increment
        amount: Fee charged per increment
        base:   Fee carried in from the previous slabs. None means the rule
                applies to the whole claim value, not the excess.
    """

    lower: Decimal
    upper: Optional[Decimal]
    unit: Decimal
    amount: Decimal
    base: Optional[Decimal] = None

    def contains(self, value: Decimal) -> bool:
        if value <= self.lower:
            return False
        return self.upper is None or value <= self.upper

    def fee_for(self, value: Decimal) -> Decimal:
        """Unrounded fee for a claim value inside this slab."""
        if self.base is None:
            chargeable = value
            base = Decimal(0)
        else:
            chargeable = value - self.lower
            base = self.base
        units = (chargeable / self.unit).to_integral_value(rounding=ROUND_CEILING)
        return base + units * self.amount


def _slab(lower, upper, unit, amount, base=None) -> Slab:
    return Slab(
        lower=Decimal(lower),
        upper=None if upper is None else Decimal(upper),
        unit=Decimal(unit),
        amount=Decimal(amount),
        base=None if base is None else Decimal(base),
    )


COURT_FEE_SLABS: Sequence[Slab] = (
    _slab("0", "100", "5", "0.50"),
    _slab("100", "500", "10", "1.00"),
    _slab("500", "1000", "10", "1.50"),
    _slab("1000", "5000", "100", "12.20", base="150"),
    _slab("5000", "10000", "250", "24.40", base="638"),
    _slab("10000", "20000", "500", "36.50", base="1126"),
    _slab("20000", "30000", "1000", "48.80", base="1856"),
    _slab("30000", "50000", "2000", "48.80", base="2344"),
    _slab("50000", None, "5000", "48.80", base="2832"),
)


def validate_schedule(slabs: Sequence[Slab]) -> None:
    """
    Check that a schedule is usable by find_slab().

    Raises ValueError unless the slabs start at zero, are contiguous and
    ascending, and only the last one is open-ended.
    """
    if not slabs:
        raise ValueError("Fee schedule is empty")
    if slabs[0].lower != 0:
        raise ValueError("Fee schedule must start at zero")
    for index, slab in enumerate(slabs):
        is_last = index == len(slabs) - 1
        if slab.unit <= 0:
            raise ValueError(f"Slab {index + 1} has a non-positive unit")
        if slab.upper is None:
            if not is_last:
                raise ValueError(f"Slab {index + 1} is open-ended but not last")
            continue
        if slab.upper <= slab.lower:
            raise ValueError(f"Slab {index + 1} has an empty range")
        if is_last:
            raise ValueError("Last slab must be open-ended")
        if slabs[index + 1].lower != slab.upper:
            raise ValueError(f"Gap or overlap after slab {index + 1}")


validate_schedule(COURT_FEE_SLABS)


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps 100.5 as 100.5 rather than its binary expansion
        return Decimal(str(value))
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return Decimal("NaN")


def _precise(value: Decimal):
    """
    Decimal context wide enough to carry value exactly to the paisa.

    The default 28-digit context cannot quantize amounts from about 1e26 up.
    """
    ctx: Context = getcontext().copy()
    if value.is_finite():
        digits = max(value.adjusted(), 0) + max(-value.as_tuple().exponent, 0) + 8
        ctx.prec = max(ctx.prec, digits)
        ctx.Emax = max(ctx.Emax, digits)
    return localcontext(ctx)


def money(value: Number) -> Decimal:
    """Quantize to paise using half-up rounding."""
    value = _to_decimal(value)
    with _precise(value):
        return value.quantize(PAISE, rounding=ROUND_HALF_UP)


def find_slab(claim_value: Number, slabs: Sequence[Slab] = COURT_FEE_SLABS) -> Optional[Slab]:
    """Return the slab governing a claim value, or None when no fee applies."""
    value = _to_decimal(claim_value)
    if not value.is_finite() or value <= 0:
        return None
    for slab in slabs:
        if slab.contains(value):
            return slab
    return None


def slab_number(slab: Slab, slabs: Sequence[Slab] = COURT_FEE_SLABS) -> int:
    """1-based position of a slab in its schedule."""
    return list(slabs).index(slab) + 1


def compute_fee(claim_value: Number, slabs: Sequence[Slab] = COURT_FEE_SLABS) -> Decimal:
    """
    Court fee for a claim value.

    Non-positive, NaN, and non-finite inputs give Decimal("0.00"). Never
    raises for numeric input; unparseable strings count as NaN.
    """
    value = _to_decimal(claim_value)
    slab = find_slab(value, slabs)
    if slab is None:
        return ZERO
    with _precise(value):
        return money(slab.fee_for(value))


# ══════════════════════════════════════════════════════════════════════════
# Case type adjustment
# ══════════════════════════════════════════════════════════════════════════


class CaseType(str, Enum):
    PLAINT = "plaint"
    APPEAL = "appeal"
    POSSESSION = "possession"
    REVIEW_BEFORE_90 = "review_before_90"
    REVIEW_AFTER_90 = "review_after_90"


CASE_TYPE_LABELS = {
    CaseType.PLAINT: "Plaint / Written Statement",
    CaseType.APPEAL: "Memorandum of Appeal",
    CaseType.POSSESSION: "Suit for Possession (Specific Relief Act)",
    CaseType.REVIEW_BEFORE_90: "Review of Judgment (Before 90 days)",
    CaseType.REVIEW_AFTER_90: "Review of Judgment (After 90 days)",
}

# Half the schedule fee, rounded up to the whole rupee
HALF_FEE_CASE_TYPES = frozenset({CaseType.POSSESSION, CaseType.REVIEW_BEFORE_90})


def adjust_for_case_type(fee: Number, case_type: Union[CaseType, str]) -> Decimal:
    """Payable fee for a case type, given the schedule fee."""
    case_type = CaseType(case_type)
    fee = money(fee)
    if case_type in HALF_FEE_CASE_TYPES:
        with _precise(fee):
            return money((fee / 2).to_integral_value(rounding=ROUND_CEILING))
    return fee


# ══════════════════════════════════════════════════════════════════════════
# Amount in words (Indian numbering)
# ══════════════════════════════════════════════════════════════════════════

_ONES = [
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
]
_TENS = [
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
]

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000
HUNDRED = 100

# Integer digits beyond which to_words refuses an amount
MAX_SPELLED_DIGITS = 100


def _below_hundred(n: int) -> List[str]:
    if n < 20:
        return [_ONES[n]] if n else []
    tens, ones = divmod(n, 10)
    words = [_TENS[tens]]
    if ones:
        words.append(_ONES[ones])
    return words


def integer_to_words(n: int) -> str:
    """Spell a non-negative integer using crore/lakh/thousand grouping."""
    if n < 0:
        raise ValueError("Cannot spell a negative number")
    if n == 0:
        return "zero"

    words: List[str] = []
    crores, n = divmod(n, CRORE)
    if crores:
        # Crore counts above 99 are spelled with the same grouping
        words.extend([integer_to_words(crores), "crore"])
    lakhs, n = divmod(n, LAKH)
    if lakhs:
        words.extend(_below_hundred(lakhs) + ["lakh"])
    thousands, n = divmod(n, THOUSAND)
    if thousands:
        words.extend(_below_hundred(thousands) + ["thousand"])
    hundreds, n = divmod(n, HUNDRED)
    if hundreds:
        words.extend([_ONES[hundreds], "hundred"])
    words.extend(_below_hundred(n))
    return " ".join(words)


def to_words(amount: Number) -> str:
    """
    Rupee amount in words, e.g. 100.50 -> "one hundred Rupees and fifty Paise".

    Paise are the fractional part rounded half-up to two digits.
    """
    value = _to_decimal(amount)
    if not value.is_finite() or value < 0:
        raise ValueError(f"Cannot spell amount {amount!r}")
    if value.adjusted() >= MAX_SPELLED_DIGITS:
        raise ValueError(f"Amount {amount!r} is too large to spell")

    with _precise(value):
        value = money(value)
        rupees = int(value)
        paise = int((value - rupees) * 100)

    phrase = f"{integer_to_words(rupees)} Rupees"
    if paise:
        phrase += f" and {integer_to_words(paise)} Paise"
    return phrase


# ══════════════════════════════════════════════════════════════════════════
# Display formatting
# ══════════════════════════════════════════════════════════════════════════


def group_indian(digits: str) -> str:
    """Insert en-IN separators into a string of integer digits: 1234567 -> 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency_display(amount: Number, symbol: str = "₹") -> str:
    """
    Render an amount the way the en-IN locale shows currency.

    0-2 fraction digits: 150 -> "₹150", 2880.8 -> "₹2,880.8", 100000 -> "₹1,00,000".
    """
    value = _to_decimal(amount)
    if not value.is_finite():
        raise ValueError(f"Cannot format amount {amount!r}")

    with _precise(value):
        value = money(value)
        sign = "-" if value < 0 else ""
        integer_part, _, fraction = f"{abs(value):.2f}".partition(".")
    fraction = fraction.rstrip("0")

    text = f"{sign}{symbol}{group_indian(integer_part)}"
    if fraction:
        text += f".{fraction}"
    return text
