from sqlalchemy import and_
from sqlalchemy.orm import Session
from app.models.diet_plan import SavedDietPlan

"""
Saved Diet Plan CRUD
--------------------
Pure Database Access Object for saved diet plans.
Every single-plan lookup is scoped by owner, so another user's plan
looks exactly like a missing one.
Plan generation lives in app.services.diet_plan_service.
"""

def get_diet_plans_by_user(db: Session, user_id: int):
    """All saved plans owned by the user, oldest first"""
    return db.query(SavedDietPlan).filter(
        SavedDietPlan.user_id == user_id
    ).order_by(SavedDietPlan.created_at, SavedDietPlan.id).all()

def get_diet_plan_by_user_and_id(db: Session, user_id: int, plan_id: int):
    """Specific plan for a user"""
    return db.query(SavedDietPlan).filter(
        and_(
            SavedDietPlan.id == plan_id,
            SavedDietPlan.user_id == user_id
        )
    ).first()

def create_diet_plan(db: Session, user_id: int, plan_input: dict, plan: dict) -> SavedDietPlan:
    db_plan = SavedDietPlan(
        user_id=user_id,
        input=plan_input,
        plan=plan
    )
    try:
        db.add(db_plan)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_plan)
    return db_plan

def replace_diet_plan(db: Session, db_plan: SavedDietPlan, plan_input: dict, plan: dict) -> SavedDietPlan:
    """
    Replace input and result wholesale. Assigning new dicts is enough
    for SQLAlchemy to see the JSON columns as modified.
    """
    db_plan.input = plan_input
    db_plan.plan = plan
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_plan)
    return db_plan

def delete_diet_plan_by_user_and_id(db: Session, user_id: int, plan_id: int):
    """Returns the deleted plan, or None if the user owns no such plan"""
    db_plan = get_diet_plan_by_user_and_id(db, user_id, plan_id)
    if not db_plan:
        return None
    try:
        db.delete(db_plan)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return db_plan
