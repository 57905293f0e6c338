"""Transaction service - parse, validate and filter use cases."""

from typing import List

import structlog

from src.application.dto import FilterRequest, ValidatorRequest
from src.core.metrics import record_parsed, record_validation
from src.service.savings import (
    EnrichedTransaction,
    RawTransaction,
    ValidationOutcome,
    enrich,
    validate,
)

logger = structlog.get_logger(__name__)


class TransactionService:
    """
    Application service for transaction use cases.

    Wraps the enrichment and validation engine with logging and metrics.
    """

    def parse_transactions(
        self,
        transactions: List[RawTransaction],
    ) -> List[EnrichedTransaction]:
        """
        Round each expense up to the next 100 and attach its remnant.

        Args:
            transactions: Raw expenses

        Returns:
            Enriched transactions in input order
        """
        enriched = enrich(transactions)
        record_parsed(len(enriched))
        logger.info("transactions_parsed", count=len(enriched))
        return enriched

    def validate_transactions(self, request: ValidatorRequest) -> ValidationOutcome:
        """
        Validate enriched transactions against the wage.

        Args:
            request: Wage and enriched transactions

        Returns:
            ValidationOutcome with valid and invalid transactions
        """
        outcome = validate(request.effective_wage, request.transactions)
        self._log_outcome("transactions_validated", len(request.transactions), outcome)
        return outcome

    def filter_transactions(self, request: FilterRequest) -> ValidationOutcome:
        """
        Enrich raw transactions, validate them and tag K-period membership.

        Ceiling and remnant are recomputed server side, so only the wage,
        duplicate and sign rules can reject a transaction here.

        Args:
            request: Wage, raw transactions and periods

        Returns:
            ValidationOutcome whose valid entries carry the in-bucket flag
        """
        enriched = enrich(request.transactions)
        outcome = validate(request.effective_wage, enriched, request.k)
        self._log_outcome("transactions_filtered", len(enriched), outcome)
        return outcome

    def _log_outcome(
        self,
        event: str,
        received: int,
        outcome: ValidationOutcome,
    ) -> None:
        reasons = [t.message for t in outcome.invalid_transactions]
        record_validation(len(outcome.valid_transactions), reasons)
        logger.info(
            event,
            received=received,
            valid=len(outcome.valid_transactions),
            invalid=len(outcome.invalid_transactions),
        )
