from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base


class Calculation(Base):
    __tablename__ = "calculations"  # append-only remuneration history

    id = Column(Integer, primary_key=True, index=True)
    examiner_id = Column(Integer, ForeignKey("examiners.id"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=True)

    # ==========================================================
    # subject snapshot at calculation time
    # ==========================================================
    subject_code = Column(String(30), nullable=False)
    subject_title = Column(String(200), nullable=False)
    set = Column(String(10), nullable=False)
    exam_duration = Column(Integer, nullable=False)
    base_remuneration = Column(Integer, nullable=False)

    multiplier = Column(Float, nullable=False)
    total_remuneration = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    # ✅ owning examiner (N:1)
    examiner = relationship("Examiner", back_populates="calculations")
