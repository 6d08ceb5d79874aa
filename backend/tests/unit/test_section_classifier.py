"""
Unit tests for the section classifier.
Tests hint selection, rule precedence and the supplies fallback.
"""

import pytest

from case_cards.domain.entities import ITEM_SECTION_KEYS
from case_cards.services.section_classifier import (
    CLASSIFICATION_RULES,
    DEFAULT_SECTION,
    classify,
    section_hint,
)


class TestSectionHint:
    def test_section_takes_precedence_over_category(self):
        assert section_hint({"section": "Equipment", "category": "Meds"}) == "equipment"

    def test_falls_back_to_category(self):
        assert section_hint({"category": "Medication"}) == "medication"

    def test_empty_section_falls_back_to_category(self):
        assert section_hint({"section": "", "category": "Notes"}) == "notes"

    def test_non_string_hints_are_ignored(self):
        assert section_hint({"section": 42, "category": "Instrument"}) == "instrument"
        assert section_hint({"section": None}) == ""

    def test_non_mapping_item_has_no_hint(self):
        assert section_hint("instrument") == ""
        assert section_hint(None) == ""


class TestClassify:
    @pytest.mark.parametrize(
        "hint, expected",
        [
            ("Instrument Tray", "instrumentation"),
            ("instruments", "instrumentation"),
            ("Equipment", "equipment"),
            ("equip", "equipment"),
            ("Medications", "medications"),
            ("MED", "medications"),
            ("Setup", "setup_positioning"),
            ("Patient Positioning", "setup_positioning"),
            ("Surgeon Notes", "surgeon_notes"),
            ("note", "surgeon_notes"),
            ("Supplies", "supplies"),
            ("Sutures", "supplies"),
        ],
    )
    def test_routes_hint_to_section(self, hint, expected):
        assert classify({"section": hint}) == expected

    def test_category_hint_is_used_without_section(self):
        assert classify({"catalogId": "eq-1", "category": "Equipment"}) == "equipment"

    def test_item_without_hint_goes_to_supplies(self):
        assert classify({"catalogId": "cat-1", "quantity": 2}) == DEFAULT_SECTION

    def test_medication_rule_precedes_positioning(self):
        """'med' is checked before 'position', so the first rule wins."""
        assert classify({"section": "Medication positioning aid"}) == "medications"

    def test_instrument_rule_precedes_everything(self):
        assert classify({"section": "Instrument equipment notes"}) == "instrumentation"

    def test_equipment_precedes_medications(self):
        assert classify({"section": "Equipment for meds"}) == "equipment"

    def test_setup_precedes_notes(self):
        assert classify({"section": "Setup notes"}) == "setup_positioning"

    @pytest.mark.parametrize(
        "item",
        [
            {},
            None,
            "instrument",
            42,
            [],
            {"section": None, "category": None},
            {"section": 3.5},
            {"section": {"nested": "instrument"}},
        ],
    )
    def test_classify_is_total(self, item):
        assert classify(item) in ITEM_SECTION_KEYS

    def test_rule_table_targets_known_sections(self):
        targets = [section for _, section in CLASSIFICATION_RULES]
        assert targets == [
            "instrumentation",
            "equipment",
            "medications",
            "setup_positioning",
            "surgeon_notes",
        ]
        assert DEFAULT_SECTION not in targets
