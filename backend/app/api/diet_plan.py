import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.api.auth import get_current_user
from app.crud import diet_plan as crud_diet_plan
from app.crud.food_item import SqlFoodCatalog
from app.models.user import User
from app.schemas.diet_plan import (
    DietPlanInput, DietPlanResult, DietPlanSaveRequest,
    SaveDietPlanResponse, UpdateDietPlanResponse, SavedDietPlanList
)
from app.services.diet_plan_service import (
    build_diet_plan, preview_diet_plan, NoMatchingFoodError, BudgetTooLowError
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/diet",
    tags=["Diet Plans"]
)


@router.post("/generate", response_model=DietPlanResult)
def generate_diet_plan_endpoint(
    plan_input: DietPlanInput,
    db: Session = Depends(get_db)
):
    """
    Stateless preview. If the budget is too low the numbers still come back,
    with a warning message and no day-by-day plan.
    """
    try:
        return preview_diet_plan(plan_input, SqlFoodCatalog(db))
    except NoMatchingFoodError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/save", response_model=SaveDietPlanResponse, status_code=status.HTTP_201_CREATED)
def save_diet_plan_endpoint(
    request: DietPlanSaveRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    plan_input, result = request.split()
    saved_plan = crud_diet_plan.create_diet_plan(
        db,
        user_id=current_user.id,
        plan_input=plan_input.model_dump(mode="json"),
        plan=result
    )
    logger.info(f"Saved diet plan {saved_plan.id} for user {current_user.id}")
    return {"message": "Diet plan saved successfully", "saved_plan": saved_plan}


@router.get("/plans", response_model=SavedDietPlanList)
def list_diet_plans_endpoint(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    plans = crud_diet_plan.get_diet_plans_by_user(db, current_user.id)
    return {"message": "Fetched saved diet plans successfully", "plans": plans}


@router.put("/update/{plan_id}", response_model=UpdateDietPlanResponse)
def update_diet_plan_endpoint(
    plan_id: int,
    plan_input: DietPlanInput,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    existing_plan = crud_diet_plan.get_diet_plan_by_user_and_id(db, current_user.id, plan_id)
    if not existing_plan:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found or unauthorized")

    try:
        result = build_diet_plan(plan_input, SqlFoodCatalog(db))
    except NoMatchingFoodError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except BudgetTooLowError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    updated_plan = crud_diet_plan.replace_diet_plan(
        db,
        existing_plan,
        plan_input=plan_input.model_dump(mode="json"),
        plan=result.model_dump(mode="json")
    )
    logger.info(f"Rebuilt diet plan {plan_id} for user {current_user.id}")
    return {"message": "Plan updated successfully", "updated_plan": updated_plan}


@router.delete("/delete/{plan_id}")
def delete_diet_plan_endpoint(
    plan_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    deleted = crud_diet_plan.delete_diet_plan_by_user_and_id(db, current_user.id, plan_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Diet plan not found or unauthorized")
    return {"message": "Diet plan deleted successfully"}
