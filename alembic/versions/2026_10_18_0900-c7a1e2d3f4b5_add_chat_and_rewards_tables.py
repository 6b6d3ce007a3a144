"""add profiles, conversations, messages, rewards and style pack tables

Revision ID: c7a1e2d3f4b5
Revises:
Create Date: 2026-10-18

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "c7a1e2d3f4b5"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

OWNED_TABLES = ("profiles", "conversations", "rewards", "user_style_packs")

DEFAULT_STYLE_PACKS = [
    (
        "Professional",
        "Formal and precise responses",
        "You are a professional AI assistant. Provide clear, concise, and formal "
        "responses. Maintain a professional tone in all interactions.",
    ),
    (
        "Creative",
        "Imaginative and artistic responses",
        "You are a creative AI assistant. Use imaginative language, metaphors, and "
        "artistic expression. Be inspirational and think outside the box.",
    ),
    (
        "Casual",
        "Friendly and relaxed responses",
        "You are a casual, friendly AI assistant. Use conversational language, "
        "contractions, and a relaxed tone. Be approachable and warm.",
    ),
    (
        "Technical",
        "Detailed and analytical responses",
        "You are a technical AI assistant. Provide detailed, analytical responses "
        "with technical accuracy. Include relevant technical details and explanations.",
    ),
]


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.Uuid(),
        primary_key=True,
        server_default=sa.text("gen_random_uuid()"),
    )


def _timestamp(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(), nullable=False, server_default=sa.text("now()"))


def upgrade() -> None:
    """Create tables, owner-scoped RLS policies, updated_at triggers; seed style packs."""
    op.create_table(
        "profiles",
        _uuid_pk(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("display_name", sa.String(length=256), nullable=True),
        sa.Column("avatar_url", sa.String(length=1024), nullable=True),
        sa.Column("total_points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("current_streak", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_activity_date", sa.Date(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_index("ix_profiles_user_id", "profiles", ["user_id"], unique=True)

    op.create_table(
        "conversations",
        _uuid_pk(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column(
            "title",
            sa.String(length=256),
            nullable=False,
            server_default="New Conversation",
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_index("ix_conversations_user_id", "conversations", ["user_id"])

    op.create_table(
        "messages",
        _uuid_pk(),
        sa.Column("conversation_id", sa.Uuid(), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("tokens_used", sa.Integer(), nullable=True),
        sa.Column("response_time_ms", sa.Integer(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["conversation_id"], ["conversations.id"], ondelete="CASCADE"
        ),
        sa.CheckConstraint("role IN ('user', 'assistant')", name="ck_messages_role"),
    )
    op.create_index("ix_messages_conversation_id", "messages", ["conversation_id"])

    op.create_table(
        "rewards",
        _uuid_pk(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("type", sa.String(length=32), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.CheckConstraint(
            "type IN ('message', 'streak', 'boost', 'style_pack')",
            name="ck_rewards_type",
        ),
    )
    op.create_index("ix_rewards_user_id", "rewards", ["user_id"])

    op.create_table(
        "style_packs",
        _uuid_pk(),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("system_prompt", sa.Text(), nullable=False),
        sa.Column("cost", sa.Integer(), nullable=False, server_default="5"),
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")
        ),
        _timestamp("created_at"),
    )

    op.create_table(
        "user_style_packs",
        _uuid_pk(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("style_pack_id", sa.Uuid(), nullable=False),
        _timestamp("purchased_at"),
        sa.ForeignKeyConstraint(
            ["style_pack_id"], ["style_packs.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint("user_id", "style_pack_id", name="uq_user_style_packs"),
    )
    op.create_index("ix_user_style_packs_user_id", "user_style_packs", ["user_id"])

    # Row-level security. Roles without BYPASSRLS see only rows whose owner
    # matches app.current_user_id; the table owner (the API) is unaffected.
    for table in OWNED_TABLES + ("messages", "style_packs"):
        op.execute(f"ALTER TABLE {table} ENABLE ROW LEVEL SECURITY")
    for table in OWNED_TABLES:
        op.execute(f"""
            CREATE POLICY {table}_owner ON {table}
            USING (user_id = current_setting('app.current_user_id', true)::uuid)
            WITH CHECK (user_id = current_setting('app.current_user_id', true)::uuid)
            """)
    op.execute("""
        CREATE POLICY messages_owner ON messages
        USING (conversation_id IN (
            SELECT id FROM conversations
            WHERE user_id = current_setting('app.current_user_id', true)::uuid
        ))
        """)
    op.execute("""
        CREATE POLICY style_packs_active ON style_packs
        FOR SELECT USING (is_active = true)
        """)

    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER LANGUAGE plpgsql AS $$
        BEGIN
          NEW.updated_at = now();
          RETURN NEW;
        END;
        $$
        """)
    for table in ("profiles", "conversations"):
        op.execute(f"""
            CREATE TRIGGER update_{table}_updated_at
            BEFORE UPDATE ON {table}
            FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
            """)

    conn = op.get_bind()
    for name, description, system_prompt in DEFAULT_STYLE_PACKS:
        conn.execute(
            sa.text("""
                INSERT INTO style_packs (name, description, system_prompt, cost)
                VALUES (:name, :description, :system_prompt, 5)
                """),
            {"name": name, "description": description, "system_prompt": system_prompt},
        )


def downgrade() -> None:
    """Drop all chat and reward tables."""
    for table in ("profiles", "conversations"):
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")
    op.drop_index("ix_user_style_packs_user_id", table_name="user_style_packs")
    op.drop_table("user_style_packs")
    op.drop_table("style_packs")
    op.drop_index("ix_rewards_user_id", table_name="rewards")
    op.drop_table("rewards")
    op.drop_index("ix_messages_conversation_id", table_name="messages")
    op.drop_table("messages")
    op.drop_index("ix_conversations_user_id", table_name="conversations")
    op.drop_table("conversations")
    op.drop_index("ix_profiles_user_id", table_name="profiles")
    op.drop_table("profiles")
