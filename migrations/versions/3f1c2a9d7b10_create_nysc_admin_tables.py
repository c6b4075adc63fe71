"""create_nysc_admin_tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('students',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('fname', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
    sa.Column('lname', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
    sa.Column('mname', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('matric_no', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
    sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    sa.Column('phone', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
    sa.Column('gender', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
    sa.Column('dob', sa.Date(), nullable=True),
    sa.Column('state_of_origin', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('lga', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('course_of_study', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    sa.Column('department', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    sa.Column('graduation_year', sqlmodel.sql.sqltypes.AutoString(length=4), nullable=True),
    sa.Column('cgpa', sa.Float(), nullable=True),
    sa.Column('jambno', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
    sa.Column('study_mode', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.Column('updated_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_students_matric_no'), 'students', ['matric_no'], unique=True)

    op.create_table('studentnysc',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('student_id', sa.Integer(), nullable=False),
    sa.Column('fname', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('mname', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('lname', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('gender', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
    sa.Column('dob', sa.Date(), nullable=True),
    sa.Column('marital_status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
    sa.Column('phone', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
    sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    sa.Column('address', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
    sa.Column('state_of_origin', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('lga', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('matric_no', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
    sa.Column('jambno', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
    sa.Column('study_mode', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
    sa.Column('course_of_study', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    sa.Column('department', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    sa.Column('faculty', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    sa.Column('level', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
    sa.Column('graduation_year', sqlmodel.sql.sqltypes.AutoString(length=4), nullable=True),
    sa.Column('cgpa', sa.Float(), nullable=True),
    sa.Column('emergency_contact_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    sa.Column('emergency_contact_phone', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
    sa.Column('emergency_contact_relationship', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('emergency_contact_address', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
    sa.Column('is_paid', sa.Boolean(), nullable=False, server_default='false'),
    sa.Column('payment_amount', sa.Integer(), nullable=True),
    sa.Column('payment_reference', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('payment_date', sa.DateTime(), nullable=True),
    sa.Column('is_submitted', sa.Boolean(), nullable=False, server_default='false'),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.Column('updated_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_studentnysc_student_id'), 'studentnysc', ['student_id'], unique=False)
    op.create_index(op.f('ix_studentnysc_gender'), 'studentnysc', ['gender'], unique=False)
    op.create_index(op.f('ix_studentnysc_state_of_origin'), 'studentnysc', ['state_of_origin'], unique=False)
    op.create_index(op.f('ix_studentnysc_matric_no'), 'studentnysc', ['matric_no'], unique=False)
    op.create_index(op.f('ix_studentnysc_department'), 'studentnysc', ['department'], unique=False)

    op.create_table('nysc_payments',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('student_id', sa.Integer(), nullable=False),
    sa.Column('amount', sa.Integer(), nullable=False),
    sa.Column('payment_method', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
    sa.Column('status', sa.Enum('pending', 'successful', 'failed', name='paymentstatus'), nullable=False),
    sa.Column('payment_reference', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('payment_date', sa.DateTime(), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.Column('updated_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_nysc_payments_student_id'), 'nysc_payments', ['student_id'], unique=False)
    op.create_index(op.f('ix_nysc_payments_status'), 'nysc_payments', ['status'], unique=False)
    op.create_index(op.f('ix_nysc_payments_payment_reference'), 'nysc_payments', ['payment_reference'], unique=False)

    op.create_table('nysc_temp_submissions',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('student_id', sa.Integer(), nullable=False),
    sa.Column('form_data', sa.JSON(), nullable=False),
    sa.Column('status', sa.Enum('pending', 'approved', 'rejected', name='submissionstatus'), nullable=False),
    sa.Column('reviewed_at', sa.DateTime(), nullable=True),
    sa.Column('reviewed_by', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('review_notes', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.Column('updated_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_nysc_temp_submissions_student_id'), 'nysc_temp_submissions', ['student_id'], unique=False)
    op.create_index(op.f('ix_nysc_temp_submissions_status'), 'nysc_temp_submissions', ['status'], unique=False)

    op.create_table('staff',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('fname', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
    sa.Column('lname', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
    sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
    sa.Column('password', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
    sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
    sa.Column('last_login_at', sa.DateTime(), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.Column('updated_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_staff_email'), 'staff', ['email'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_staff_email'), table_name='staff')
    op.drop_table('staff')
    op.drop_index(op.f('ix_nysc_temp_submissions_status'), table_name='nysc_temp_submissions')
    op.drop_index(op.f('ix_nysc_temp_submissions_student_id'), table_name='nysc_temp_submissions')
    op.drop_table('nysc_temp_submissions')
    op.drop_index(op.f('ix_nysc_payments_payment_reference'), table_name='nysc_payments')
    op.drop_index(op.f('ix_nysc_payments_status'), table_name='nysc_payments')
    op.drop_index(op.f('ix_nysc_payments_student_id'), table_name='nysc_payments')
    op.drop_table('nysc_payments')
    op.drop_index(op.f('ix_studentnysc_department'), table_name='studentnysc')
    op.drop_index(op.f('ix_studentnysc_matric_no'), table_name='studentnysc')
    op.drop_index(op.f('ix_studentnysc_state_of_origin'), table_name='studentnysc')
    op.drop_index(op.f('ix_studentnysc_gender'), table_name='studentnysc')
    op.drop_index(op.f('ix_studentnysc_student_id'), table_name='studentnysc')
    op.drop_table('studentnysc')
    op.drop_index(op.f('ix_students_matric_no'), table_name='students')
    op.drop_table('students')
    sa.Enum(name='submissionstatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='paymentstatus').drop(op.get_bind(), checkfirst=True)
