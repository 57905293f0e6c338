"""Returns service - orchestrates the returns projection use case."""

import structlog

from src.application.dto import ReturnsRequest
from src.core.metrics import record_projection, track_projection_latency
from src.domain.exceptions import InstrumentNotFoundException
from src.service.savings import InvestmentMode, ReturnsProjection, project

logger = structlog.get_logger(__name__)


class ReturnsService:
    """
    Application service for returns projection use cases.
    """

    def calculate_returns(
        self,
        request: ReturnsRequest,
        instrument: str,
    ) -> ReturnsProjection:
        """
        Project returns of the remnants for an instrument.

        Args:
            request: Investor profile, periods and transactions
            instrument: "nps" or "index"

        Returns:
            ReturnsProjection with totals and per-K savings

        Raises:
            InstrumentNotFoundException: If the instrument is not supported
        """
        mode = self._resolve_mode(instrument)

        log = logger.bind(
            instrument=mode.value,
            age=request.age,
            transactions=len(request.transactions),
            buckets=len(request.k),
        )
        log.info("returns_requested")

        with track_projection_latency(mode.value):
            projection = project(
                age=request.age,
                wage=request.wage,
                inflation=request.inflation,
                fixed_periods=request.q,
                extra_periods=request.p,
                bucket_periods=request.k,
                transactions=request.transactions,
                mode=mode,
            )

        record_projection(
            mode.value,
            [float(s.amount) for s in projection.savings_by_dates],
        )
        log.info(
            "returns_projected",
            total_amount=str(projection.total_transaction_amount),
            total_ceiling=str(projection.total_ceiling),
        )

        return projection

    def _resolve_mode(self, instrument: str) -> InvestmentMode:
        try:
            return InvestmentMode(instrument.lower())
        except ValueError:
            logger.warning("instrument_not_found", instrument=instrument)
            raise InstrumentNotFoundException(instrument)
