import logging
import os
import uuid

from config import MAX_PRESCRIPTION_BYTES, PRESCRIPTION_EXTENSIONS, UPLOADS_DIR
from services.errors import ValidationError

logger = logging.getLogger(__name__)


def save_prescription(filename: str | None, content: bytes, uploads_dir: str = UPLOADS_DIR) -> str:
    """Store an uploaded prescription and return its public ``/uploads/...`` path."""
    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in PRESCRIPTION_EXTENSIONS:
        raise ValidationError(f"Unsupported prescription file type '{ext or filename}'")
    if not content:
        raise ValidationError("Prescription file is empty")
    if len(content) > MAX_PRESCRIPTION_BYTES:
        raise ValidationError("Prescription file is too large")

    target_dir = os.path.join(uploads_dir, "prescriptions")
    os.makedirs(target_dir, exist_ok=True)
    stored_name = f"{uuid.uuid4().hex}{ext}"
    with open(os.path.join(target_dir, stored_name), "wb") as f:
        f.write(content)
    logger.info("Stored prescription %s (%d bytes)", stored_name, len(content))
    return f"/uploads/prescriptions/{stored_name}"
