from datetime import datetime
from sqlalchemy import (
    Column, Integer, ForeignKey, DateTime
)
from sqlalchemy.orm import relationship
from app.database import Base, JSONType


class SavedDietPlan(Base):
    __tablename__ = "saved_diet_plans"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Snapshot of the request that produced the plan
    input = Column(
        JSONType,
        nullable=False,
        comment="Biometrics and preferences: age, gender, weight, height, goal, budget..."
    )

    # Full generated result, including the day-by-day plan
    plan = Column(
        JSONType,
        nullable=False,
        comment="daily_calorie_goal, total_days, costs, budget_message, plan[]"
    )

    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship(
        "User",
        back_populates="diet_plans"
    )
