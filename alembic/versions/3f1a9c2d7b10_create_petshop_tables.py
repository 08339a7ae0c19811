"""create users, pets, clinical, grooming, catalog and appointment tables

Revision ID: 3f1a9c2d7b10
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY


# revision identifiers, used by Alembic.
revision: str = '3f1a9c2d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _string_list(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(name, ARRAY(sa.String()), nullable=nullable, server_default='{}')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        _string_list('roles'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=False)

    op.create_table(
        'pets',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('owner_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('species', sa.String(length=32), nullable=False),
        sa.Column('breed', sa.String(length=255), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('gender', sa.String(length=32), nullable=False, server_default='unknown'),
        sa.Column('color', sa.String(length=100), nullable=True),
        sa.Column('weight', sa.Numeric(5, 2), nullable=True),
        sa.Column('microchip_number', sa.String(length=64), nullable=True),
        sa.Column('temperament', sa.String(length=32), nullable=False, server_default='unknown'),
        _string_list('behavior_notes'),
        sa.Column('general_notes', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        *_timestamps(),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('microchip_number', name='ux_pets_microchip_number'),
    )
    op.create_index('idx_pets_owner_active', 'pets', ['owner_id', 'is_active', 'created_at'])

    op.create_table(
        'services',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_by_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['created_by_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', name='ux_services_name'),
        sa.CheckConstraint('price >= 0', name='ck_services_price_non_negative'),
        sa.CheckConstraint('duration_minutes > 0', name='ck_services_duration_positive'),
    )

    op.create_table(
        'products',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        _string_list('sizes'),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('species', sa.String(length=32), nullable=True),
        _string_list('tags'),
        sa.Column('created_by_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['created_by_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('title', name='ux_products_title'),
        sa.UniqueConstraint('slug', name='ux_products_slug'),
        sa.CheckConstraint('price >= 0', name='ck_products_price_non_negative'),
        sa.CheckConstraint('stock >= 0', name='ck_products_stock_non_negative'),
    )

    op.create_table(
        'medical_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('pet_id', sa.Uuid(), nullable=False),
        sa.Column('veterinarian_id', sa.Uuid(), nullable=True),
        sa.Column('visit_date', sa.Date(), nullable=False),
        sa.Column('visit_type', sa.String(length=32), nullable=False),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('diagnosis', sa.Text(), nullable=True),
        sa.Column('treatment', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        _string_list('prescriptions'),
        sa.Column('follow_up_date', sa.Date(), nullable=True),
        sa.Column('weight_at_visit', sa.Numeric(5, 2), nullable=True),
        sa.Column('temperature', sa.Numeric(4, 1), nullable=True),
        sa.Column('service_cost', sa.Numeric(10, 2), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['pet_id'], ['pets.id']),
        sa.ForeignKeyConstraint(['veterinarian_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_medical_records_pet_visit', 'medical_records', ['pet_id', 'visit_date'])

    op.create_table(
        'vaccinations',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('pet_id', sa.Uuid(), nullable=False),
        sa.Column('veterinarian_id', sa.Uuid(), nullable=True),
        sa.Column('vaccine_name', sa.String(length=255), nullable=False),
        sa.Column('administered_date', sa.Date(), nullable=False),
        sa.Column('next_due_date', sa.Date(), nullable=True),
        sa.Column('batch_number', sa.String(length=100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['pet_id'], ['pets.id']),
        sa.ForeignKeyConstraint(['veterinarian_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'idx_vaccinations_pet_administered', 'vaccinations', ['pet_id', 'administered_date']
    )
    op.create_index(
        'idx_vaccinations_next_due',
        'vaccinations',
        ['next_due_date'],
        postgresql_where=sa.text('next_due_date IS NOT NULL'),
    )

    op.create_table(
        'grooming_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('pet_id', sa.Uuid(), nullable=False),
        sa.Column('groomer_id', sa.Uuid(), nullable=True),
        sa.Column('session_date', sa.Date(), nullable=False),
        _string_list('services_performed'),
        _string_list('products_used'),
        sa.Column('hair_style', sa.String(length=255), nullable=True),
        sa.Column('skin_condition', sa.Text(), nullable=True),
        sa.Column('coat_condition', sa.Text(), nullable=True),
        sa.Column('behavior_during_session', sa.Text(), nullable=True),
        sa.Column('observations', sa.Text(), nullable=True),
        sa.Column('recommendations', sa.Text(), nullable=True),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('service_cost', sa.Numeric(10, 2), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['pet_id'], ['pets.id']),
        sa.ForeignKeyConstraint(['groomer_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'idx_grooming_records_pet_session', 'grooming_records', ['pet_id', 'session_date']
    )

    op.create_table(
        'appointments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('pet_id', sa.Uuid(), nullable=False),
        sa.Column('service_id', sa.Uuid(), nullable=False),
        sa.Column('customer_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='pending'),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['pet_id'], ['pets.id']),
        sa.ForeignKeyConstraint(['service_id'], ['services.id']),
        sa.ForeignKeyConstraint(['customer_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_appointments_pet_date', 'appointments', ['pet_id', 'date'])
    op.create_index('idx_appointments_customer_date', 'appointments', ['customer_id', 'date'])


def downgrade() -> None:
    op.drop_index('idx_appointments_customer_date', table_name='appointments')
    op.drop_index('idx_appointments_pet_date', table_name='appointments')
    op.drop_table('appointments')
    op.drop_index('idx_grooming_records_pet_session', table_name='grooming_records')
    op.drop_table('grooming_records')
    op.drop_index('idx_vaccinations_next_due', table_name='vaccinations')
    op.drop_index('idx_vaccinations_pet_administered', table_name='vaccinations')
    op.drop_table('vaccinations')
    op.drop_index('idx_medical_records_pet_visit', table_name='medical_records')
    op.drop_table('medical_records')
    op.drop_table('products')
    op.drop_table('services')
    op.drop_index('idx_pets_owner_active', table_name='pets')
    op.drop_table('pets')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
