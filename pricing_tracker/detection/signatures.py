# pricing_tracker/detection/signatures.py
"""
Known column headers for each kind of export, including the spellings used
by older versions of the reports. Matching is case-insensitive.

Add new spellings here; the classification rules pick them up unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class ColumnSignature:
    name: str
    columns: Tuple[str, ...]

    @property
    def lowered(self) -> FrozenSet[str]:
        return frozenset(c.lower() for c in self.columns)


LINE_LIST = ColumnSignature("LineList", (
    "Style #", "Style", "Style Number", "Style#",
    "Style Name", "Description", "Style Desc",
    "MSRP", "US MSRP", "Retail",
    "Wholesale", "US WHSL", "WHSL", "Price",
    "Category", "Cat Desc",
    "Division", "Division Desc",
))

COSTS = ColumnSignature("Costs", (
    "FOB", "Factory Cost",
    "Landed", "Landed Cost", "LDP",
    "Duty", "Duty %", "Duty Cost", "Duty Cost $",
    "Freight", "Freight Cost",
    "Tariff", "Tariff Cost", "Tariff Cost $", "Tariff  Cost $",
    "Overhead", "Overhead Cost",
    "Suggested MSRP", "Suggested Selling Price",
    # cost history sheet
    "Total Cost", "Std Cost", "GP %",
    "Fab $", "Trm $", "Process $",
    "Cost_Sheet",
))

SALES = ColumnSignature("Sales", (
    "Revenue", "Net Sales", "Sales", "$ Current Booked Net",
    "Units", "Qty", "Quantity", "Units Current Booked",
    "Customer", "Customer Name",
    "Ship Date", "Date",
    "Customer Type",
))

PRICING = ColumnSignature("Pricing", (
    "Price", "Wholesale", "WHSL",
    "MSRP", "Retail",
    "Season", "Sea Desc",
    "Style", "Style #",
    "Color", "Clr",
))

# Pricing and line list exports share most of their columns; these are the
# only headers that tell them apart.
PRICING_MARKERS: FrozenSet[str] = frozenset({"sea desc", "season desc", "clr_desc"})
LINE_LIST_MARKERS: FrozenSet[str] = frozenset({"category", "cat desc", "division", "division desc"})
