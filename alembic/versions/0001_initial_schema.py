"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17 12:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_comments_id"), "comments", ["id"], unique=False)

    op.create_table(
        "loyalty_programs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("business_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("rules", sa.JSON(), nullable=False),
        sa.Column("active", sa.Boolean(), server_default="true", nullable=False),
        *_timestamps(),
        sa.CheckConstraint("type IN ('points', 'punchcard', 'tiered')", name="ck_loyalty_programs_type"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_loyalty_programs_business_id"), "loyalty_programs", ["business_id"], unique=False)

    op.create_table(
        "loyalty_cards",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("customer_id", sa.Uuid(), nullable=False),
        sa.Column("business_id", sa.Uuid(), nullable=False),
        sa.Column("card_number", sa.String(length=50), nullable=True),
        sa.Column("points_balance", sa.Integer(), server_default="0", nullable=False),
        sa.Column("tier", sa.String(length=50), server_default="standard", nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default="true", nullable=False),
        sa.Column("issue_date", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        sa.Column("last_activity_date", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("points_balance >= 0", name="ck_loyalty_cards_points_balance"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("customer_id", "business_id", name="uq_loyalty_cards_customer_business"),
    )
    op.create_index(op.f("ix_loyalty_cards_customer_id"), "loyalty_cards", ["customer_id"], unique=False)
    op.create_index(op.f("ix_loyalty_cards_business_id"), "loyalty_cards", ["business_id"], unique=False)

    op.create_table(
        "rewards",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("business_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("points_required", sa.Integer(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default="true", nullable=False),
        sa.Column("redemption_limit", sa.Integer(), nullable=True),
        sa.Column("valid_from", sa.DateTime(timezone=True), nullable=True),
        sa.Column("valid_until", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("points_required > 0", name="ck_rewards_points_required"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_rewards_business_id"), "rewards", ["business_id"], unique=False)

    op.create_table(
        "redemption_codes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("reward_id", sa.Uuid(), nullable=False),
        sa.Column("customer_id", sa.Uuid(), nullable=False),
        sa.Column("code", sa.String(length=20), nullable=False),
        sa.Column("redeemed", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("redeemed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["reward_id"], ["rewards.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
    )
    op.create_index(op.f("ix_redemption_codes_reward_id"), "redemption_codes", ["reward_id"], unique=False)
    op.create_index(op.f("ix_redemption_codes_customer_id"), "redemption_codes", ["customer_id"], unique=False)

    op.create_table(
        "qr_codes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("business_id", sa.Uuid(), nullable=False),
        sa.Column("target_type", sa.String(length=50), nullable=False),
        sa.Column("target_id", sa.String(length=255), nullable=True),
        sa.Column("qr_data", sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_qr_codes_business_id"), "qr_codes", ["business_id"], unique=False)

    op.create_table(
        "settings",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("business_id", sa.Uuid(), nullable=False),
        sa.Column("key", sa.String(length=100), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("business_id", "key", name="uq_settings_business_key"),
    )
    op.create_index(op.f("ix_settings_business_id"), "settings", ["business_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_settings_business_id"), table_name="settings")
    op.drop_table("settings")
    op.drop_index(op.f("ix_qr_codes_business_id"), table_name="qr_codes")
    op.drop_table("qr_codes")
    op.drop_index(op.f("ix_redemption_codes_customer_id"), table_name="redemption_codes")
    op.drop_index(op.f("ix_redemption_codes_reward_id"), table_name="redemption_codes")
    op.drop_table("redemption_codes")
    op.drop_index(op.f("ix_rewards_business_id"), table_name="rewards")
    op.drop_table("rewards")
    op.drop_index(op.f("ix_loyalty_cards_business_id"), table_name="loyalty_cards")
    op.drop_index(op.f("ix_loyalty_cards_customer_id"), table_name="loyalty_cards")
    op.drop_table("loyalty_cards")
    op.drop_index(op.f("ix_loyalty_programs_business_id"), table_name="loyalty_programs")
    op.drop_table("loyalty_programs")
    op.drop_index(op.f("ix_comments_id"), table_name="comments")
    op.drop_table("comments")
