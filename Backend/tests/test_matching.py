import pytest

from services.matching import (
    LineItemRequest,
    StockScanMatcher,
    available_labels,
    extract_medicine_id,
    normalize_display_name,
    resolve_line_item,
    split_base_name,
)


class TestHelpers:
    @pytest.mark.parametrize(
        "raw, expected",
        [("med-123", 123), ("123", 123), (45, 45), (" 7 ", 7), ("abc", None), (None, None), ("0", None), (True, None)],
    )
    def test_extract_medicine_id(self, raw, expected):
        assert extract_medicine_id(raw) == expected

    def test_split_base_name(self):
        assert split_base_name("Glucose 5% w/v") == "Glucose"
        assert split_base_name("Amoxicillin 500mg") == "Amoxicillin"
        assert split_base_name("Vitamin D3") == "Vitamin D3"

    def test_normalize_display_name(self):
        assert normalize_display_name("  Para   cetamol \t") == "Para cetamol"
        assert normalize_display_name(None) == ""


@pytest.fixture
def stocked(pharmacy, make_stock):
    return {
        "paracetamol": make_stock(pharmacy.id, "Paracetamol", "500mg", price=500, quantity=10),
        "glucose": make_stock(pharmacy.id, "Glucose", "5% w/v", price=1200, quantity=4),
        "azithromycin": make_stock(pharmacy.id, "Azithromycin", "suspension", requires_prescription=True),
        "antacid": make_stock(pharmacy.id, "Magnesium Hydroxide / Aluminium Hydroxide / Simethicone"),
    }


def _resolve(db, pharmacy, name=None, id=None, strategies=None):
    return resolve_line_item(db, pharmacy.id, LineItemRequest(name=name, quantity=1, id=id), strategies)


class TestResolveLineItem:
    def test_id_wins_over_name(self, db, pharmacy, stocked):
        target = stocked["glucose"]
        match = _resolve(db, pharmacy, name="Paracetamol", id=f"med-{target.medicine_id}")
        assert match.strategy == "medicine_id"
        assert match.stock.id == target.id

    def test_id_outside_pharmacy_falls_back_to_name(self, db, pharmacy, other_pharmacy, make_stock, stocked):
        elsewhere = make_stock(other_pharmacy.id, "Cetirizine", "10mg")
        match = _resolve(db, pharmacy, name="paracetamol", id=elsewhere.medicine_id)
        assert match.strategy == "exact_name"
        assert match.stock.id == stocked["paracetamol"].id

    def test_exact_name_ignores_case_and_spacing(self, db, pharmacy, stocked):
        match = _resolve(db, pharmacy, name="  PARACETAMOL ")
        assert match.strategy == "exact_name"

    def test_base_name_with_percent_strength(self, db, pharmacy, stocked):
        match = _resolve(db, pharmacy, name="Glucose 5% w/v")
        assert match.strategy == "base_name"
        assert match.stock.id == stocked["glucose"].id

    def test_compound_forms(self, db, pharmacy, stocked):
        match = _resolve(db, pharmacy, name="Azithromycin (suspension)")
        assert match.strategy == "compound_name"
        match = _resolve(db, pharmacy, name="500mg Paracetamol")
        assert match.strategy == "compound_name"
        assert match.stock.id == stocked["paracetamol"].id

    def test_stock_scan_finds_partial_names(self, db, pharmacy, stocked):
        match = _resolve(db, pharmacy, name="Magnesium Hydroxide")
        assert match.strategy == "stock_scan"
        assert match.stock.id == stocked["antacid"].id

    def test_stock_scan_matches_when_stored_name_is_contained(self, db, pharmacy, stocked):
        match = _resolve(db, pharmacy, name="Glucose infusion bag")
        assert match.stock.id == stocked["glucose"].id

    def test_unknown_medicine_is_none(self, db, pharmacy, stocked):
        assert _resolve(db, pharmacy, name="Unobtainium") is None

    def test_other_pharmacy_stock_is_invisible(self, db, other_pharmacy, stocked):
        assert _resolve(db, other_pharmacy, name="Paracetamol") is None

    def test_first_strategy_hit_wins(self, db, pharmacy, make_stock):
        forte = make_stock(pharmacy.id, "Ibuprofen Forte")
        plain = make_stock(pharmacy.id, "Ibuprofen")
        assert _resolve(db, pharmacy, name="Ibuprofen").stock.id == plain.id
        # Scanning alone stops at the lowest stock id.
        assert _resolve(db, pharmacy, name="Ibuprofen", strategies=[StockScanMatcher()]).stock.id == forte.id

    def test_symbol_only_name_does_not_scan(self, db, pharmacy, stocked):
        assert _resolve(db, pharmacy, name="(%)") is None


def test_available_labels(db, pharmacy, stocked):
    labels = available_labels(db, pharmacy.id)
    assert labels[:2] == ["Paracetamol 500mg", "Glucose 5% w/v"]
    assert len(labels) == 4
