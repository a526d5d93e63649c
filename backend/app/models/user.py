from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    password = Column(String(200), nullable=False)  # argon2 hash
    created_at = Column(DateTime, default=datetime.utcnow)

    diet_plans = relationship("SavedDietPlan", back_populates="user", cascade="all, delete")
