"""Nutrition resolution across curated, FDC and estimated sources."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from nutrition_resolver.domain.nutrition import (
    AliasEntry,
    FoodCandidate,
    NutritionProfile,
    Portion,
    Provenance,
    clamp_grams,
    round_half_up,
)
from nutrition_resolver.services.aliases import AliasMatcher, should_use_fdc_data
from nutrition_resolver.services.candy import CandyMatcher
from nutrition_resolver.services.estimation import (
    ZERO_CALORIE_PROFILE,
    estimate_per_100g,
    is_zero_calorie_beverage,
)
from nutrition_resolver.services.normalizer import normalize_name, parse_measurement
from nutrition_resolver.services.scoring import CandidateSelector
from nutrition_resolver.services.units import UnitConverter

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Resolve a food name and portion into a scaled nutrition profile.

    Sources are tried in a fixed order: the zero-calorie beverage list,
    the curated dish and candy tables when they are preferred for the
    name, the best scored FDC record, the curated tables again, then
    keyword estimation. Every call returns a profile;
    failures only lower the provenance.
    """

    selector: CandidateSelector
    alias_matcher: AliasMatcher
    unit_converter: UnitConverter
    candy_matcher: CandyMatcher = field(default_factory=CandyMatcher)
    debug: bool = False

    async def resolve_nutrition(
        self, food_name: str, measurement: str | None = ""
    ) -> NutritionProfile:
        """Resolve nutrition for a free-text food and measurement."""
        name = normalize_name(food_name)
        parsed = parse_measurement(measurement)
        candidate = await self._select_candidate(food_name, name)
        portion = self.unit_converter.to_grams(
            name, parsed, candidate.serving_size_grams
        )
        return self._compose(name, candidate, portion)

    async def resolve_by_portion_grams(
        self, food_name: str, grams: float
    ) -> NutritionProfile:
        """Resolve nutrition for an explicit weight in grams."""
        name = normalize_name(food_name)
        candidate = await self._select_candidate(food_name, name)
        weight = round_half_up(clamp_grams(float(grams)), 1)
        portion = Portion(quantity=weight, unit="g", grams=weight, basis="grams")
        return self._compose(name, candidate, portion)

    async def resolve_many(
        self, items: Sequence[tuple[str, str]]
    ) -> list[NutritionProfile]:
        """Resolve several foods concurrently, preserving input order."""
        results = await asyncio.gather(
            *(self.resolve_nutrition(name, measurement) for name, measurement in items)
        )
        return list(results)

    async def _select_candidate(self, food_name: str, name: str) -> FoodCandidate:
        """Pick the per-100g source for a normalized name."""
        try:
            if name and is_zero_calorie_beverage(name):
                return _zero_calorie_candidate(food_name)
            alias = self._curated_entry(name)
            if alias is not None and not should_use_fdc_data(name):
                return _alias_candidate(alias)
            if not name:
                return _estimated_candidate(food_name, name, records_seen=False)

            selection = await self.selector.select(name)
            if selection.candidate is not None:
                if self.debug:
                    _logger.info(
                        "Resolved %s from FDC: %s (score=%s)",
                        name,
                        selection.candidate.name,
                        selection.candidate.quality_score,
                    )
                return selection.candidate
            if alias is not None:
                return _alias_candidate(alias)
            return _estimated_candidate(
                food_name, name, records_seen=selection.records_seen
            )
        except Exception:
            _logger.exception("Nutrition resolution failed, estimating: name=%s", name)
            return _estimated_candidate(food_name, name, records_seen=False)

    def _curated_entry(self, name: str) -> AliasEntry | None:
        if not name:
            return None
        return self.alias_matcher.match(name) or self.candy_matcher.match(name)

    def _compose(
        self, name: str, candidate: FoodCandidate, portion: Portion
    ) -> NutritionProfile:
        nutrients = candidate.per_100g.scaled(portion.grams)
        return NutritionProfile(
            name=candidate.name,
            measurement=_describe_portion(portion),
            quantity=portion.quantity,
            unit=portion.unit,
            grams=portion.grams,
            estimated_calories=int(nutrients.calories),
            nutrients=nutrients,
            nutrition_per_100g=candidate.per_100g,
            provenance=candidate.provenance,
            quality_score=candidate.quality_score,
            note=candidate.note,
            equivalent_measurement=self.unit_converter.equivalent_measurement(
                portion, candidate.per_100g
            ),
            variation_note=self.unit_converter.variation_note(name, portion.unit),
        )


def _alias_candidate(entry: AliasEntry) -> FoodCandidate:
    return FoodCandidate(
        name=entry.display_name,
        per_100g=entry.per_100g,
        provenance=Provenance.ENHANCED_DB,
        serving_size_grams=entry.portion_weight_grams,
        note=entry.note or f"From curated dish database ({entry.category})",
    )


def _zero_calorie_candidate(food_name: str) -> FoodCandidate:
    return FoodCandidate(
        name=food_name.strip(),
        per_100g=ZERO_CALORIE_PROFILE,
        provenance=Provenance.ESTIMATION,
        note="Zero-calorie beverage",
    )


def _estimated_candidate(
    food_name: str, name: str, *, records_seen: bool
) -> FoodCandidate:
    label, per_100g = estimate_per_100g(name)
    if records_seen:
        provenance = Provenance.ESTIMATION_NOT_FOUND
        note = f"No usable USDA match; estimated from typical {label} values"
    else:
        provenance = Provenance.ESTIMATION
        note = f"Estimated from typical {label} values"
    return FoodCandidate(
        name=(food_name or "").strip() or "Unknown food",
        per_100g=per_100g,
        provenance=provenance,
        note=note,
    )


def _describe_portion(portion: Portion) -> str:
    amount = f"{portion.quantity:g} {portion.unit}".strip()
    return f"{amount} (~{portion.grams:g}g)"
