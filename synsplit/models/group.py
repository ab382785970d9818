from sqlalchemy import Column, Integer, String, DateTime, Boolean, false
from synsplit.core.utils import utcnow
from synsplit.db.session import Base

class Group(Base):
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    mode = Column(String, nullable=False, default="direct")
    # pool mode: may non-admin members add expenses
    allow_member_expenses = Column(Boolean, nullable=False, default=False, server_default=false())
    created_by = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
