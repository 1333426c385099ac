"""Initial schema - regulation, snapshot, regulation_change.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "regulation",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_regulation_url", "regulation", ["url"], unique=True)

    # Append-only: rows are never updated.
    op.create_table(
        "snapshot",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("regulation_id", sa.UUID(), sa.ForeignKey("regulation.id", ondelete="CASCADE"), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("captured_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_snapshot_regulation_captured", "snapshot", ["regulation_id", "captured_at"])

    op.create_table(
        "regulation_change",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("regulation_id", sa.UUID(), sa.ForeignKey("regulation.id", ondelete="CASCADE"), nullable=False),
        sa.Column("prior_snapshot_id", sa.UUID(), sa.ForeignKey("snapshot.id"), nullable=True),
        sa.Column("current_snapshot_id", sa.UUID(), sa.ForeignKey("snapshot.id"), nullable=False),
        sa.Column("detected_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("reviewed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_regulation_change_detected_at", "regulation_change", ["detected_at", "id"])
    op.create_index("ix_regulation_change_regulation", "regulation_change", ["regulation_id"])


def downgrade() -> None:
    op.drop_table("regulation_change")
    op.drop_table("snapshot")
    op.drop_table("regulation")
