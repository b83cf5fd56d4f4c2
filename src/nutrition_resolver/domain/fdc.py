"""FoodData Central records and cached entries."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nutrition_resolver.domain.nutrition import NUTRIENT_FIELDS, NutrientProfile

NUTRIENT_SCHEMA_VERSION = 1


class NutrientRecord(BaseModel):
    """Versioned per-100g nutrient record stored alongside cached foods.

    A field is ``None`` when the source record did not report it, which
    is different from a reported zero.
    """

    model_config = ConfigDict(extra="ignore")

    schema_version: int = NUTRIENT_SCHEMA_VERSION
    calories: float | None = Field(default=None, description="Energy, kcal")
    protein: float | None = Field(default=None, description="Protein, g")
    carbs: float | None = Field(default=None, description="Carbohydrate, g")
    fat: float | None = Field(default=None, description="Total lipid, g")
    fiber: float | None = Field(default=None, description="Dietary fiber, g")
    sugar: float | None = Field(default=None, description="Total sugars, g")
    sodium: float | None = Field(default=None, description="Sodium, mg")
    iron: float | None = Field(default=None, description="Iron, mg")
    calcium: float | None = Field(default=None, description="Calcium, mg")
    zinc: float | None = Field(default=None, description="Zinc, mg")
    magnesium: float | None = Field(default=None, description="Magnesium, mg")
    vitamin_c: float | None = Field(default=None, description="Vitamin C, mg")
    vitamin_d: float | None = Field(default=None, description="Vitamin D2+D3, ug")
    vitamin_b12: float | None = Field(default=None, description="Vitamin B12, ug")
    folate: float | None = Field(default=None, description="Folate, ug")

    @field_validator("schema_version")
    @classmethod
    def _known_version(cls, value: int) -> int:
        if value > NUTRIENT_SCHEMA_VERSION:
            raise ValueError(f"Unsupported nutrient schema version {value}")
        return value

    def to_profile(self) -> NutrientProfile:
        """Return a complete profile with unreported or negative nutrients as zero."""
        return NutrientProfile.from_mapping(
            {name: max(getattr(self, name) or 0.0, 0.0) for name in NUTRIENT_FIELDS}
        )


class FoodRecord(BaseModel):
    """Food record as consumed from FDC or the cache store."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    fdc_id: int = Field(alias="fdcId")
    description: str = ""
    data_type: str | None = Field(default=None, alias="dataType")
    food_category: str | None = Field(default=None, alias="foodCategory")
    brand_owner: str | None = Field(default=None, alias="brandOwner")
    brand_name: str | None = Field(default=None, alias="brandName")
    ingredients: str | None = None
    serving_size: float | None = Field(default=None, alias="servingSize")
    serving_size_unit: str | None = Field(default=None, alias="servingSizeUnit")
    household_serving_full_text: str | None = Field(
        default=None, alias="householdServingFullText"
    )
    nutrients: NutrientRecord = Field(default_factory=NutrientRecord)

    @field_validator("food_category", mode="before")
    @classmethod
    def _category_description(cls, value: object) -> object:
        # Detail responses nest the category as an object.
        if isinstance(value, dict):
            return value.get("description")
        return value

    @field_validator("serving_size", mode="before")
    @classmethod
    def _serving_size(cls, value: object) -> object:
        if value in ("", None):
            return None
        return value


@dataclass(frozen=True)
class CacheEntry:
    """Cached FDC record with popularity metadata."""

    record: FoodRecord
    search_count: int
    last_updated: datetime | None

    @property
    def fdc_id(self) -> int:
        return self.record.fdc_id
