import pytest

from services.errors import ConflictError, NotFoundError
from services.insurance import (
    add_insurance_partner,
    get_pharmacy_insurance,
    list_insurance_types,
    remove_insurance_partner,
)


class TestInsurancePartners:
    def test_catalog_sorted_by_name(self, db, insurance_types):
        assert [i.name for i in list_insurance_types(db)] == ["Britam", "Eden Care Medical", "Sonarwa"]

    def test_add_and_remove(self, db, pharmacy, insurance_types):
        britam, eden, _ = insurance_types
        add_insurance_partner(db, pharmacy.id, eden.id)
        rows = add_insurance_partner(db, pharmacy.id, britam.id)
        assert [i.name for i in rows] == ["Britam", "Eden Care Medical"]

        rows = remove_insurance_partner(db, pharmacy.id, britam.id)
        assert [i.name for i in rows] == ["Eden Care Medical"]

    def test_duplicate_partner_conflicts(self, db, pharmacy, insurance_types):
        add_insurance_partner(db, pharmacy.id, insurance_types[0].id)
        with pytest.raises(ConflictError):
            add_insurance_partner(db, pharmacy.id, insurance_types[0].id)
        assert len(get_pharmacy_insurance(db, pharmacy.id)) == 1

    def test_unknown_insurance_type(self, db, pharmacy, insurance_types):
        with pytest.raises(NotFoundError):
            add_insurance_partner(db, pharmacy.id, 9999)

    def test_remove_missing_partner(self, db, pharmacy, insurance_types):
        with pytest.raises(NotFoundError):
            remove_insurance_partner(db, pharmacy.id, insurance_types[1].id)

    def test_partners_are_per_pharmacy(self, db, pharmacy, other_pharmacy, insurance_types):
        add_insurance_partner(db, pharmacy.id, insurance_types[2].id)
        assert get_pharmacy_insurance(db, other_pharmacy.id) == []
