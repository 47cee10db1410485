from sqlalchemy import Column, Integer, String, Boolean, Index, UniqueConstraint, text

from database import Base


class Medicine(Base):
    __tablename__ = "medicines"
    __table_args__ = (
        UniqueConstraint("name", "strength", name="uq_medicine_name_strength"),
        # NULL strengths compare as distinct in the constraint above.
        Index(
            "uq_medicine_name_no_strength",
            "name",
            unique=True,
            sqlite_where=text("strength IS NULL"),
            postgresql_where=text("strength IS NULL"),
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    strength = Column(String(120), nullable=True)
    requires_prescription = Column(Boolean, default=False, nullable=False)

    @property
    def label(self) -> str:
        return f"{self.name} {self.strength or ''}".strip()
