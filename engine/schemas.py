"""
Input schemas - validation of values scanned from the terminal.

This module defines Pydantic types for the raw card fields so that:
- Each typed value can be checked on its own (the collector re-prompts until
  one parses), and
- A complete set of fields becomes a finalized Card in one step.

Only type-correctness is checked; domains such as 'A'..'H' for the state or
1..4 for the city are not enforced.
"""

from typing import Annotated, Any, Dict

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter

from engine.config import DEFAULT_CONFIG
from engine.derived import finalize_card
from engine.models import Card


def _first_letter(value: Any) -> Any:
    """Keep the first non-blank character, upper-cased (rest of the line is ignored)."""
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            raise ValueError("State must be one character.")
        return stripped[0].upper()
    return value


def _clip_name(value: str) -> str:
    value = value.rstrip("\r\n")
    return value[: DEFAULT_CONFIG["name_max_length"]]


StateLetter = Annotated[str, BeforeValidator(_first_letter)]
CityName = Annotated[str, AfterValidator(_clip_name)]
Population = Annotated[int, Field(ge=0, le=DEFAULT_CONFIG["population_max"])]


class CardInput(BaseModel):
    """
    Raw card fields as scanned from the terminal.

    Usage:
        card = CardInput(
            state="a",
            city_index=1,
            name="Alpha",
            population=1000,
            area=100.0,
            gdp=50000.0,
            tourist_spots=5,
        ).to_card()
    """
    model_config = ConfigDict(frozen=True)

    state: StateLetter = Field(..., description="State letter, upper-cased")
    city_index: int = Field(..., description="City number inside the state")
    name: CityName = Field("", description="City name, clipped to the maximum length")
    population: Population = Field(..., description="Inhabitants")
    area: float = Field(..., description="Area in km²")
    gdp: float = Field(..., description="GDP in R$")
    tourist_spots: int = Field(..., description="Number of tourist spots")

    def to_card(self) -> Card:
        """Build a Card with its code and derived fields already computed."""
        return finalize_card(Card(**self.model_dump()))


# One adapter per field, used to validate a single scanned value
FIELD_ADAPTERS: Dict[str, TypeAdapter] = {
    "state": TypeAdapter(StateLetter),
    "city_index": TypeAdapter(int),
    "name": TypeAdapter(CityName),
    "population": TypeAdapter(Population),
    "area": TypeAdapter(float),
    "gdp": TypeAdapter(float),
    "tourist_spots": TypeAdapter(int),
}

# Menu choices and attribute selectors are plain integers
CHOICE_ADAPTER = TypeAdapter(int)


def parse_field(field_name: str, raw: str) -> Any:
    """
    Validate one scanned value for a card field.

    Raises:
        pydantic.ValidationError: If the value does not have the field's type
        KeyError: If field_name is not a card field
    """
    adapter = FIELD_ADAPTERS[field_name]
    if field_name != "name":
        raw = raw.strip()
    return adapter.validate_python(raw)
