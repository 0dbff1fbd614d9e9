"""create customers table

Revision ID: 3f9c1e2a7b40
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f9c1e2a7b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'customers',
        sa.Column('customer_id', sa.String(length=5), nullable=False),
        sa.Column('company_name', sa.String(length=40), nullable=False),
        sa.Column('contact_name', sa.String(length=30), nullable=True),
        sa.Column('address', sa.String(length=60), nullable=True),
        sa.Column('city', sa.String(length=15), nullable=True),
        sa.Column('country', sa.String(length=15), nullable=True),
        sa.Column('phone', sa.String(length=24), nullable=True),
        sa.PrimaryKeyConstraint('customer_id'),
    )


def downgrade() -> None:
    op.drop_table('customers')
