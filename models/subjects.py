from sqlalchemy import Column, Integer, String
from database.db import Base

class Subject(Base):
    __tablename__ = "subjects"  # examinable subjects

    id = Column(Integer, primary_key=True, index=True)          # subject ID (PK)
    subject_code = Column(String(30), nullable=False)           # subject code (e.g. CS301)
    subject_title = Column(String(200), nullable=False)         # subject title
    set = Column(String(10), nullable=False)                    # question paper set (A, B, ...)
    exam_duration = Column(Integer, nullable=False)             # exam duration in minutes
    base_remuneration = Column(Integer, nullable=False)         # base pay per paper
