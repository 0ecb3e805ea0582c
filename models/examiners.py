from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base


class Examiner(Base):
    __tablename__ = "examiners"

    id = Column(Integer, primary_key=True, index=True)          # examiner ID (PK, autoincrement)
    panel_chairman = Column(String(120), nullable=False)        # panel chairman name
    paper_setter = Column(String(120), nullable=False)          # paper setter name
    pattern = Column(String(50), nullable=False)                # exam pattern (e.g. 2019, CBCS)
    class_name = Column("class", String(50), nullable=False)    # class (e.g. SE, TE)
    subject = Column(String(120), nullable=False)               # subject taught
    sem = Column(String(20), nullable=False)                    # semester
    mail_id = Column(String(120), nullable=False)               # email
    contact_number = Column(String(20), nullable=False)         # phone number
    bank_account_no = Column(String(40), nullable=False)        # bank account number
    ifsc = Column(String(20), nullable=False)                   # IFSC code
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    # ✅ calculations attached to this examiner (1:N), oldest first
    calculations = relationship(
        "Calculation",
        back_populates="examiner",
        order_by="Calculation.id",
    )

    @property
    def label(self):
        """Select-box label: '<paper setter> - <subject>'."""
        return f"{self.paper_setter} - {self.subject}"
