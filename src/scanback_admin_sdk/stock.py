"""Allocation and activation counts for a party's QR codes.

Every function here is pure: the same records always produce the same
``StockBalance`` regardless of their order.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable

from .models import QRCodeRecord, QRType
from .models_stock import StockBalance, StockSummary

_TYPE_ORDER = list(QRType)


def compute_stock_summary(records: Iterable[QRCodeRecord]) -> StockBalance:
    totals: Counter[QRType] = Counter()
    activated: Counter[QRType] = Counter()
    for record in records:
        totals[record.type] += 1
        if record.is_activated:
            activated[record.type] += 1

    # only types present in the input get a bucket
    stock = {
        qr_type: StockSummary.from_counts(totals[qr_type], activated[qr_type])
        for qr_type in _TYPE_ORDER
        if totals[qr_type]
    }
    summary = StockSummary()
    for bucket in stock.values():
        summary = summary + bucket
    return StockBalance(summary=summary, stock=stock)


def activation_rate(bucket: StockSummary) -> float:
    """Percent of the bucket that is activated. Undefined for an empty bucket."""
    if bucket.total <= 0:
        raise ValueError("activation rate is undefined for an empty bucket")
    return bucket.activated / bucket.total * 100
