"""Initial clinic schema

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Lookup tables
    op.create_table('types',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=80), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('specialties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=80), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # People
    op.create_table('owners',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=30), nullable=False),
        sa.Column('last_name', sa.String(length=30), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('city', sa.String(length=80), nullable=False),
        sa.Column('telephone', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_owners_last_name', 'owners', ['last_name'])

    op.create_table('vets',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=30), nullable=False),
        sa.Column('last_name', sa.String(length=30), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_vets_last_name', 'vets', ['last_name'])

    op.create_table('vet_specialties',
        sa.Column('vet_id', sa.Integer(), nullable=False),
        sa.Column('specialty_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['vet_id'], ['vets.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['specialty_id'], ['specialties.id']),
        sa.PrimaryKeyConstraint('vet_id', 'specialty_id')
    )

    # Pets and visits
    op.create_table('pets',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=80), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=True, comment="Pet's birth date"),
        sa.Column('type_id', sa.Integer(), nullable=True, comment="Id of the pet's type"),
        sa.Column('owner_id', sa.Integer(), nullable=True, comment="Id of the pet's owner"),
        sa.ForeignKeyConstraint(['type_id'], ['types.id']),
        sa.ForeignKeyConstraint(['owner_id'], ['owners.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_pets_owner_id', 'pets', ['owner_id'])
    op.create_index('idx_pets_owner_name', 'pets', ['owner_id', 'name'])

    op.create_table('visits',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('visit_date', sa.Date(), nullable=False, comment='Date of the visit'),
        sa.Column('description', sa.String(length=255), nullable=False, comment='What happened during the visit'),
        sa.Column('pet_id', sa.Integer(), nullable=False, comment='Id of the visited pet'),
        sa.ForeignKeyConstraint(['pet_id'], ['pets.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_visits_pet_id', 'visits', ['pet_id'])


def downgrade() -> None:
    op.drop_index('ix_visits_pet_id', table_name='visits')
    op.drop_table('visits')
    op.drop_index('idx_pets_owner_name', table_name='pets')
    op.drop_index('ix_pets_owner_id', table_name='pets')
    op.drop_table('pets')
    op.drop_table('vet_specialties')
    op.drop_index('ix_vets_last_name', table_name='vets')
    op.drop_table('vets')
    op.drop_index('ix_owners_last_name', table_name='owners')
    op.drop_table('owners')
    op.drop_table('specialties')
    op.drop_table('types')
