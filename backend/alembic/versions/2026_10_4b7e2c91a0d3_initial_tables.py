"""initial tables: users, food_items, saved_diet_plans

Revision ID: 4b7e2c91a0d3
Revises:
Create Date: 2026-10-19 11:02:47.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4b7e2c91a0d3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

json_type = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('password', sa.String(length=200), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)

    op.create_table(
        'food_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('meal_time', sa.String(), nullable=False),
        sa.Column('calories_per_100g', sa.Float(), nullable=True),
        sa.Column('protein', sa.Float(), nullable=True),
        sa.Column('fat', sa.Float(), nullable=True),
        sa.Column('carbs', sa.Float(), nullable=True),
        sa.Column('suitable_for', json_type, nullable=False, comment='Goals, e.g. weight_loss, weight_gain'),
        sa.Column('health_tags', json_type, nullable=False, comment='e.g. diabetic_friendly, heart'),
        sa.Column('suitable_bmi', json_type, nullable=False, comment='underweight, normal, overweight'),
        sa.Column('amount_per_kg', sa.String(), nullable=True),
        sa.Column('image', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_food_items_id'), 'food_items', ['id'], unique=False)
    op.create_index(op.f('ix_food_items_name'), 'food_items', ['name'], unique=False)
    op.create_index(op.f('ix_food_items_type'), 'food_items', ['type'], unique=False)
    op.create_index(op.f('ix_food_items_meal_time'), 'food_items', ['meal_time'], unique=False)

    op.create_table(
        'saved_diet_plans',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('input', json_type, nullable=False,
                  comment='Biometrics and preferences: age, gender, weight, height, goal, budget...'),
        sa.Column('plan', json_type, nullable=False,
                  comment='daily_calorie_goal, total_days, costs, budget_message, plan[]'),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_saved_diet_plans_id'), 'saved_diet_plans', ['id'], unique=False)
    op.create_index(op.f('ix_saved_diet_plans_user_id'), 'saved_diet_plans', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_saved_diet_plans_user_id'), table_name='saved_diet_plans')
    op.drop_index(op.f('ix_saved_diet_plans_id'), table_name='saved_diet_plans')
    op.drop_table('saved_diet_plans')
    op.drop_index(op.f('ix_food_items_meal_time'), table_name='food_items')
    op.drop_index(op.f('ix_food_items_type'), table_name='food_items')
    op.drop_index(op.f('ix_food_items_name'), table_name='food_items')
    op.drop_index(op.f('ix_food_items_id'), table_name='food_items')
    op.drop_table('food_items')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
