"""Prometheus metrics for transfer and repayment activity"""

from prometheus_client import Counter

transfer_counter = Counter(
    "ledger_transfers_total",
    "Transfers attempted between accounts",
    ["outcome"],  # succeeded | failed
)

transfer_amount_counter = Counter(
    "ledger_transfer_amount_total",
    "Sum of successfully transferred amounts",
)

repayment_counter = Counter(
    "ledger_repayments_total",
    "Credit repayments attempted",
    ["kind", "outcome"],  # partial | full, succeeded | failed
)


def record_transfer(success: bool, amount: float) -> None:
    """Record transfer outcome; only successful amounts are summed"""
    transfer_counter.labels(outcome="succeeded" if success else "failed").inc()
    if success:
        transfer_amount_counter.inc(amount)


def record_repayment(kind: str, success: bool) -> None:
    repayment_counter.labels(kind=kind, outcome="succeeded" if success else "failed").inc()
