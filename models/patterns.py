from sqlalchemy import Column, ForeignKey, Integer, String
from database.db import Base

class Pattern(Base):
    # write-only side record of (pattern, class, subject, sem) per examiner
    __tablename__ = "patterns"

    id = Column(Integer, primary_key=True, index=True)
    examiner_id = Column(Integer, ForeignKey("examiners.id"), nullable=False)
    pattern = Column(String(50), nullable=False)
    class_name = Column("class", String(50), nullable=False)
    subject = Column(String(120), nullable=False)
    sem = Column(String(20), nullable=False)
