"""create decks and cards tables

Revision ID: 3f1c0a7b92de
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c0a7b92de"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    table_names = inspector.get_table_names()

    if "decks" not in table_names:
        op.create_table(
            "decks",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("user_id", sa.String(length=255), nullable=False),
            sa.Column("name", sa.String(length=255), nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )
        op.create_index("ix_decks_user_id", "decks", ["user_id"])

    if "cards" not in table_names:
        op.create_table(
            "cards",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("deck_id", sa.Integer(), nullable=False),
            sa.Column("front", sa.Text(), nullable=False),
            sa.Column("back", sa.Text(), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.ForeignKeyConstraint(
                ["deck_id"], ["decks.id"], name="cards_deck_id_decks_id_fk", ondelete="CASCADE"
            ),
        )
        op.create_index("ix_cards_deck_id", "cards", ["deck_id"])


def downgrade() -> None:
    op.drop_index("ix_cards_deck_id", table_name="cards")
    op.drop_table("cards")
    op.drop_index("ix_decks_user_id", table_name="decks")
    op.drop_table("decks")
