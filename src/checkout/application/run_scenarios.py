"""Application service: Run Scenarios use case.

Prices the fixed demonstration baskets and reports whether each total
matches the expected figure.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from checkout.application.dto import ScenarioResultDTO
from checkout.application.price_cart import PriceCartHandler
from checkout.domain.repository.catalog import ProductLookup, PromotionLookup


@dataclass(frozen=True)
class Scenario:
    skus: list[str]
    expected_total: Decimal

    @property
    def description(self) -> str:
        return (
            f"SKUs Scanned: {', '.join(self.skus)} "
            f"- Total expected: ${self.expected_total:.2f}"
        )


SCENARIOS = [
    Scenario(["atv", "atv", "atv", "vga"], Decimal("249.00")),
    Scenario(["atv", "ipd", "ipd", "atv", "ipd", "ipd", "ipd"], Decimal("2718.95")),
    Scenario(["mbp", "vga", "ipd"], Decimal("1949.98")),
]


class RunScenariosHandler:

    def __init__(
        self,
        product_lookup: ProductLookup,
        promotion_lookup: PromotionLookup,
        scenarios: list[Scenario] | None = None,
    ) -> None:
        self._pricer = PriceCartHandler(product_lookup, promotion_lookup)
        self._scenarios = SCENARIOS if scenarios is None else scenarios

    async def handle(self) -> list[ScenarioResultDTO]:
        results: list[ScenarioResultDTO] = []
        for scenario in self._scenarios:
            receipt = await self._pricer.handle(scenario.skus)
            results.append(
                ScenarioResultDTO(
                    description=scenario.description,
                    skus=list(scenario.skus),
                    expected_total=scenario.expected_total,
                    receipt=receipt,
                )
            )
        return results
