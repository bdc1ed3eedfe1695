"""Initial clinic schema

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table('vets',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=30), nullable=False),
        sa.Column('last_name', sa.String(length=30), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('specialties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=80), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_table('vet_specialties',
        sa.Column('vet_id', sa.Integer(), nullable=False),
        sa.Column('specialty_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['vet_id'], ['vets.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['specialty_id'], ['specialties.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('vet_id', 'specialty_id')
    )
    op.create_table('types',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=80), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_table('owners',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=30), nullable=False),
        sa.Column('last_name', sa.String(length=30), nullable=False),
        sa.Column('last_name_folded', sa.String(length=90), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('city', sa.String(length=80), nullable=False),
        sa.Column('telephone', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_owners_last_name', 'owners', ['last_name'])
    op.create_index('ix_owners_last_name_folded', 'owners', ['last_name_folded'])
    op.create_table('pets',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=30), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('type_id', sa.Integer(), nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['type_id'], ['types.id']),
        sa.ForeignKeyConstraint(['owner_id'], ['owners.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_pets_owner_id', 'pets', ['owner_id'])
    op.create_table('visits',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('pet_id', sa.Integer(), nullable=False),
        sa.Column('visit_date', sa.Date(), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(['pet_id'], ['pets.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_visits_pet_id', 'visits', ['pet_id'])


def downgrade() -> None:
    op.drop_index('ix_visits_pet_id', table_name='visits')
    op.drop_table('visits')
    op.drop_index('ix_pets_owner_id', table_name='pets')
    op.drop_table('pets')
    op.drop_index('ix_owners_last_name_folded', table_name='owners')
    op.drop_index('ix_owners_last_name', table_name='owners')
    op.drop_table('owners')
    op.drop_table('types')
    op.drop_table('vet_specialties')
    op.drop_table('specialties')
    op.drop_table('vets')
