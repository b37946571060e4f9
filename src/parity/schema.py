"""Parity report model (Pydantic)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ParityReport(BaseModel):
    """Both parity facts computed from one decoded input."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    numbers: list[int]
    sum_is_even: bool
    product_is_even: bool
