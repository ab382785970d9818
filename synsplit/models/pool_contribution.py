from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Numeric
from synsplit.core.utils import utcnow
from synsplit.db.session import Base

class PoolContribution(Base):
    __tablename__ = "pool_contributions"

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    month = Column(String(7), nullable=False)  # "2026-02"
    created_at = Column(DateTime(timezone=True), default=utcnow)
