from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Numeric, JSON
from synsplit.core.utils import utcnow
from synsplit.db.session import Base

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String, nullable=True)
    category = Column(String, nullable=False, default="others")
    mode = Column(String, nullable=False, default="direct")
    # member uid, or "pool" when the shared fund paid
    paid_by = Column(String, nullable=False)
    used_by = Column(JSON, nullable=False)
    # plain string so rows with split types we no longer know still load
    split_type = Column(String, nullable=False, default="equal")
    split_details = Column(JSON, nullable=True)
    created_by = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    edited_by = Column(String, nullable=True)
    edited_at = Column(DateTime(timezone=True), nullable=True)
