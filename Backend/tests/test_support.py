import os

import pytest

from models.user import User
from scripts.create_pharmacy_users import create_pharmacy_users, pharmacy_email
from services.errors import ValidationError
from services.prescriptions import save_prescription
from services.security import create_access_token, decode_access_token, hash_password, verify_password


class TestSecurity:
    def test_password_hash_verifies(self):
        hashed = hash_password("secret123")
        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("wrong", hashed)

    def test_garbage_hash_does_not_verify(self):
        assert not verify_password("secret123", "not-a-hash")
        assert not verify_password("secret123", None)

    def test_token_subject(self):
        assert decode_access_token(create_access_token({"sub": "42"})) == "42"
        assert decode_access_token("not.a.token") is None


class TestPrescriptionUpload:
    def test_saves_file(self, tmp_path):
        path = save_prescription("Scan.PDF", b"%PDF-1.4", uploads_dir=str(tmp_path))
        assert path.startswith("/uploads/prescriptions/") and path.endswith(".pdf")
        assert os.path.exists(tmp_path / "prescriptions" / os.path.basename(path))

    @pytest.mark.parametrize("filename, content", [("notes.txt", b"x"), ("scan.png", b"")])
    def test_rejects_bad_uploads(self, tmp_path, filename, content):
        with pytest.raises(ValidationError):
            save_prescription(filename, content, uploads_dir=str(tmp_path))


class TestPharmacyAccounts:
    def test_email_slug(self):
        assert pharmacy_email("Sara's Pharmacy Ltd") == "saras-pharmacy-ltd@medifinder.local"

    def test_creates_one_account_per_pharmacy(self, db, pharmacy, other_pharmacy):
        created = create_pharmacy_users(db, password="pw123456")
        assert {u.pharmacy_id for u in created} == {pharmacy.id, other_pharmacy.id}
        assert all(u.role == "pharmacy" for u in created)
        assert verify_password("pw123456", created[0].password_hash)

        assert create_pharmacy_users(db) == []
        assert db.query(User).count() == 2
