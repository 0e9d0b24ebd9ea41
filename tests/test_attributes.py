"""
Unit tests for engine/attributes.py
"""

import pytest
from engine.attributes import ATTRIBUTE_TABLE, attribute_from_selector, get_spec, menu_lines
from engine.errors import EngineError, InvalidAttributeError
from engine.models import Attribute, Direction


class TestAttributeTable:

    def test_table_covers_every_attribute_once(self):
        assert [spec.attribute for spec in ATTRIBUTE_TABLE] == list(Attribute)
        assert [spec.selector for spec in ATTRIBUTE_TABLE] == [1, 2, 3, 4, 5, 6]

    def test_only_density_is_lower_wins(self):
        lower = [spec.attribute for spec in ATTRIBUTE_TABLE if spec.direction == Direction.LOWER_WINS]
        assert lower == [Attribute.DENSITY]

    def test_labels(self):
        assert get_spec(Attribute.GDP).label == "PIB"
        assert get_spec(Attribute.GDP_PER_CAPITA).label == "PIB per capita"
        assert get_spec(Attribute.TOURIST_SPOTS).label == "Pontos turisticos"

    def test_integer_attributes_extract_ints(self, card1):
        assert isinstance(get_spec(Attribute.POPULATION).extract(card1), int)
        assert isinstance(get_spec(Attribute.TOURIST_SPOTS).extract(card1), int)
        assert isinstance(get_spec(Attribute.AREA).extract(card1), float)

    def test_menu_lines(self):
        lines = menu_lines()

        assert len(lines) == 6
        assert lines[0] == "1) Populacao (maior vence)"
        assert lines[4] == "5) Densidade populacional (menor vence)"


class TestAttributeFromSelector:

    @pytest.mark.parametrize("selector, expected", [
        (1, Attribute.POPULATION),
        (3, Attribute.GDP),
        (5, Attribute.DENSITY),
        (6, Attribute.GDP_PER_CAPITA),
    ])
    def test_valid_selectors(self, selector, expected):
        assert attribute_from_selector(selector) is expected

    @pytest.mark.parametrize("selector", [0, 7, -1, 100, True, "3", 3.0, None])
    def test_invalid_selectors_raise(self, selector):
        with pytest.raises(InvalidAttributeError) as exc_info:
            attribute_from_selector(selector)

        assert exc_info.value.code == "INVALID_ATTRIBUTE"
        assert exc_info.value.details == {"selector": selector}

    def test_invalid_attribute_is_engine_error(self):
        with pytest.raises(EngineError):
            attribute_from_selector(9)


class TestShortMenu:

    def test_short_menu_lines(self):
        lines = menu_lines(short=True)

        assert lines[0] == "1) Populacao (maior)"
        assert lines[4] == "5) Densidade populacional (menor)"
        assert lines[5] == "6) PIB per capita (maior)"
        assert all("vence" not in line for line in lines)
