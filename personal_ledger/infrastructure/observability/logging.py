"""Structured JSON logging for ledger operations"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from personal_ledger.config import settings

logger = logging.getLogger("personal_ledger.operations")

# Record fields holding money; rendered at cent precision in the JSON output
MONEY_FIELDS = ("amount", "paid_amount", "remaining_amount", "source_balance", "target_balance")


class LedgerJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding service metadata and cent-rounded money fields"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name

        for name in MONEY_FIELDS:
            if isinstance(log_record.get(name), float):
                log_record[name] = round(log_record[name], 2)


def setup_logging(level: str = "INFO") -> None:
    """Send JSON records for every logger to stdout at `level`"""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(LedgerJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    root.addHandler(handler)


def log_transfer(
    success: bool,
    message: str,
    amount: float,
    source_type: str,
    target_type: str,
    target_bank: str,
    source_balance: float,
    target_balance: float,
    reason: Optional[str] = None,
) -> None:
    """Log structured transfer outcome"""
    logger.log(
        logging.INFO if success else logging.WARNING,
        message,
        extra={
            "step": "transfer",
            "outcome": "succeeded" if success else "failed",
            "amount": amount,
            "source_account_type": source_type,
            "target_account_type": target_type,
            "target_bank": target_bank,
            "source_balance": source_balance,
            "target_balance": target_balance,
            "reason": reason,
        },
    )


def log_repayment(
    kind: str,
    success: bool,
    message: str,
    amount: float,
    paid_amount: float,
    remaining_amount: float,
    bank: str,
    reason: Optional[str] = None,
) -> None:
    """Log structured credit repayment outcome"""
    logger.log(
        logging.INFO if success else logging.WARNING,
        message,
        extra={
            "step": f"repayment_{kind}",
            "outcome": "succeeded" if success else "failed",
            "amount": amount,
            "paid_amount": paid_amount,
            "remaining_amount": remaining_amount,
            "bank": bank,
            "reason": reason,
        },
    )
