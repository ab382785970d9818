from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Numeric, JSON, Boolean, true
from synsplit.core.utils import utcnow
from synsplit.db.session import Base

class RecurringExpense(Base):
    __tablename__ = "recurring_expenses"

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String, nullable=False)
    category = Column(String, nullable=False, default="utilities")
    day_of_month = Column(Integer, nullable=False, default=1)
    used_by = Column(JSON, nullable=False)
    created_by = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    active = Column(Boolean, nullable=False, default=True, server_default=true())
    last_added = Column(String(7), nullable=True)  # month key of the last expense it produced
