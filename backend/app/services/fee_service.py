"""
LexSite Backend: Fee Service (Calculator Orchestrator)
========================================================

What:  Turns what the user typed into a complete fee calculation.
How:   parse claim text → compute_fee (slab schedule) → case-type adjustment
       → words + display strings. The arithmetic lives in fee_engine; this
       module owns input policy and response shaping.
Who:   Called by the /api/tools route handlers.

Input policy:
    The engine maps any non-positive value to a zero fee. The site does not
    show a zero fee for a non-positive amount: it warns the user instead.
    parse_claim_value() enforces that policy (configurable through
    settings.reject_non_positive_claims).
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

from app.config import settings
from app.exceptions import NotFoundError, ValidationError
from app.schemas.fee import (
    AmountInWordsResponse,
    CaseTypeListResponse,
    CaseTypeResponse,
    FeeCalculationResponse,
    SlabListResponse,
    SlabResponse,
)
from app.services.fee_engine import (
    CASE_TYPE_LABELS,
    COURT_FEE_SLABS,
    HALF_FEE_CASE_TYPES,
    CaseType,
    Slab,
    adjust_for_case_type,
    compute_fee,
    find_slab,
    format_currency_display,
    money,
    slab_number,
    to_words,
)

logger = logging.getLogger(__name__)

INVALID_CLAIM_MESSAGE = "Please enter a valid claim amount"
AMOUNT_TOO_LARGE_MESSAGE = "Amount exceeds the largest supported value"

RawAmount = Union[str, int, float, Decimal]


def _parse_amount(raw: RawAmount, field: str) -> Decimal:
    """Parse form text or a JSON number into a finite Decimal within settings.max_amount."""
    if isinstance(raw, bool):
        raise ValidationError(message=INVALID_CLAIM_MESSAGE, field=field, context={"value": raw})
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, float):
        value = Decimal(str(raw))
    elif isinstance(raw, int):
        value = Decimal(raw)
    else:
        # Accept what people paste from documents: "₹ 1,00,000"
        text = str(raw).strip().replace(settings.currency_symbol, "").replace(",", "").strip()
        try:
            value = Decimal(text) if text else Decimal("NaN")
        except InvalidOperation:
            value = Decimal("NaN")

    if not value.is_finite():
        raise ValidationError(
            message=INVALID_CLAIM_MESSAGE,
            field=field,
            context={"value": str(raw)},
        )
    if abs(value) > settings.max_amount:
        raise ValidationError(
            message=AMOUNT_TOO_LARGE_MESSAGE,
            field=field,
            context={"value": str(raw), "max": str(settings.max_amount)},
        )
    return value


def _slab_rule(slab: Slab) -> str:
    if slab.base is None:
        return f"ceil(v / {slab.unit}) × {slab.amount}"
    return f"{slab.base} + ceil((v - {slab.lower}) / {slab.unit}) × {slab.amount}"


def _slab_response(slab: Slab) -> SlabResponse:
    return SlabResponse(
        number=slab_number(slab),
        lower=slab.lower,
        upper=slab.upper,
        unit=slab.unit,
        amount=slab.amount,
        base=slab.base,
        rule=_slab_rule(slab),
    )


class FeeService:
    """
    Calculator operations behind /api/tools.

    Stateless; a module-level singleton is shared by all requests.
    """

    def parse_claim_value(self, raw: RawAmount) -> Decimal:
        """
        Validate a user-entered claim value.

        Raises:
            ValidationError: not a number, not finite, above max_amount, or
                             (when configured) zero or negative
        """
        value = _parse_amount(raw, field="claim_value")
        if value <= 0 and settings.reject_non_positive_claims:
            raise ValidationError(
                message=INVALID_CLAIM_MESSAGE,
                field="claim_value",
                context={"value": str(raw)},
            )
        return value

    def calculate_court_fee(
        self,
        claim_value: RawAmount,
        case_type: Union[CaseType, str] = CaseType.PLAINT,
    ) -> FeeCalculationResponse:
        """
        Full calculation for the calculator page.

        Args:
            claim_value: Raw claim text or number
            case_type:   CaseType or its string value

        Returns:
            FeeCalculationResponse with schedule fee, payable fee, words and
            display strings, and the slab used.

        Raises:
            ValidationError: invalid claim value or unknown case type
        """
        try:
            case_type = CaseType(case_type)
        except ValueError:
            raise ValidationError(
                message=f"Unknown case type '{case_type}'",
                field="case_type",
                context={"allowed": [c.value for c in CaseType]},
            )

        value = self.parse_claim_value(claim_value)
        schedule_fee = compute_fee(value)
        fee = adjust_for_case_type(schedule_fee, case_type)
        slab: Optional[Slab] = find_slab(value)

        logger.debug(
            "Court fee: claim=%s case_type=%s slab=%s schedule_fee=%s fee=%s",
            value,
            case_type.value,
            slab_number(slab) if slab else None,
            schedule_fee,
            fee,
        )

        return FeeCalculationResponse(
            claim_value=value,
            case_type=case_type,
            schedule_fee=schedule_fee,
            fee=fee,
            fee_in_words=to_words(fee),
            fee_display=format_currency_display(fee, symbol=settings.currency_symbol),
            slab=_slab_response(slab) if slab else None,
        )

    def list_slabs(self) -> SlabListResponse:
        return SlabListResponse(slabs=[_slab_response(slab) for slab in COURT_FEE_SLABS])

    def get_slab(self, number: int) -> SlabResponse:
        """
        One slab by its 1-based position.

        Raises:
            NotFoundError: no slab with that number
        """
        if not 1 <= number <= len(COURT_FEE_SLABS):
            raise NotFoundError(resource="slab", resource_id=str(number))
        return _slab_response(COURT_FEE_SLABS[number - 1])

    def list_case_types(self) -> CaseTypeListResponse:
        items: List[CaseTypeResponse] = []
        for case_type in CaseType:
            rule = "half (rounded up to the rupee)" if case_type in HALF_FEE_CASE_TYPES else "full"
            items.append(
                CaseTypeResponse(
                    value=case_type,
                    label=CASE_TYPE_LABELS[case_type],
                    fee_rule=rule,
                )
            )
        return CaseTypeListResponse(case_types=items)

    def amount_in_words(self, raw: RawAmount) -> AmountInWordsResponse:
        """
        Spell out any non-negative amount.

        Raises:
            ValidationError: not a number, not finite, negative, or above
                             max_amount
        """
        value = _parse_amount(raw, field="amount")
        if value < 0:
            raise ValidationError(
                message="Amount must not be negative",
                field="amount",
                context={"value": str(raw)},
            )
        value = money(value)
        return AmountInWordsResponse(
            amount=value,
            words=to_words(value),
            display=format_currency_display(value, symbol=settings.currency_symbol),
        )


# ── Singleton Instance ────────────────────────────────────────────────────
fee_service = FeeService()
