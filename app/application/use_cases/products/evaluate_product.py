"""Use case for checking a product against the active compliance rules."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import (
    COMPLIANCE_STATUS_COMPLIANT,
    COMPLIANCE_STATUS_NON_COMPLIANT,
    EvaluationResult,
    Product,
)
from app.domain.rules import CustomEvaluatorRegistry, RuleSet
from app.infrastructure.repositories import ProductRepository, RuleRepository
from .get_product import get_product

logger = logging.getLogger(__name__)


@dataclass
class ProductEvaluation:
    """Outcome of evaluating one product, with its status after evaluation."""

    product: Product
    result: EvaluationResult
    status_applied: bool


def _status_for(result: EvaluationResult) -> str | None:
    if result.violations:
        return COMPLIANCE_STATUS_NON_COMPLIANT
    if not result.skipped:
        return COMPLIANCE_STATUS_COMPLIANT
    # Corrupt rules were skipped, so a clean result proves nothing.
    return None


def evaluate_product(
    session: Session,
    *,
    product_id: str,
    apply_status: bool = False,
    evaluators: CustomEvaluatorRegistry | None = None,
) -> ProductEvaluation:
    """Evaluate every active rule against the product.

    With ``apply_status`` the product is marked ``non-compliant`` when any
    violation is found and ``compliant`` when none is found and no rule was
    skipped; otherwise the status is left untouched.
    """

    product = get_product(session, product_id)
    rule_set = RuleSet(RuleRepository(session).list(active=True))
    result = rule_set.evaluate(product, evaluators=evaluators)
    logger.info(
        "Product %s evaluated: %d violation(s), %d skipped rule(s)",
        product_id,
        len(result.violations),
        len(result.skipped),
    )

    status_applied = False
    if apply_status:
        status = _status_for(result)
        if status is not None and status != product.compliance_status:
            product = ProductRepository(session).update_status(product_id, status)
            logger.info("Product %s marked %s after evaluation", product_id, status)
        status_applied = status is not None

    return ProductEvaluation(product=product, result=result, status_applied=status_applied)
