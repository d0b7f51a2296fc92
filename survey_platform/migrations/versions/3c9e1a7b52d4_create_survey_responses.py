"""create survey responses table"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3c9e1a7b52d4"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "survey_responses",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("session_id", sa.String(length=128), nullable=False),
        sa.Column("tone", sa.Text(), nullable=False),
        sa.Column("sentence_length", sa.Integer(), nullable=False, server_default="3"),
        sa.Column("vocabulary", sa.Integer(), nullable=False, server_default="3"),
        sa.Column("formality", sa.Integer(), nullable=False, server_default="3"),
        sa.Column("examples", sa.Integer(), nullable=False, server_default="3"),
        sa.Column("audiences", sa.JSON(), nullable=False),
        sa.Column("content_types", sa.JSON(), nullable=False),
        sa.Column("personality", sa.JSON(), nullable=False),
        sa.Column("use_bullet_points", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("use_headers", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("use_cta", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("industry", sa.Text(), nullable=True),
        sa.Column("custom_instructions", sa.Text(), nullable=True),
        sa.Column("audience_context", sa.Text(), nullable=True),
        sa.Column("survey_data", sa.JSON(), nullable=True),
        sa.Column("completed_at", sa.String(length=40), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("session_id", name="uq_survey_response_session"),
    )
    op.create_index(op.f("ix_survey_responses_session_id"), "survey_responses", ["session_id"])


def downgrade():
    op.drop_index(op.f("ix_survey_responses_session_id"), table_name="survey_responses")
    op.drop_table("survey_responses")
