"""002: create profiles table

Revision ID: 002
Revises: 001
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE profiles (
            id              SERIAL          PRIMARY KEY,
            first_name      VARCHAR(100)    NOT NULL,
            last_name       VARCHAR(100)    NOT NULL,
            profession      VARCHAR(100)    NOT NULL,
            type            VARCHAR(20)     NOT NULL,
            balance_cents   BIGINT          NOT NULL DEFAULT 0,
            created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_profiles_type             CHECK (type IN ('client', 'contractor')),
            CONSTRAINT ck_profiles_balance_gte_0    CHECK (balance_cents >= 0)
        );
    """)
    op.execute("""
        CREATE TRIGGER trg_profiles_updated_at
            BEFORE UPDATE ON profiles
            FOR EACH ROW EXECUTE FUNCTION fn_update_timestamp();
    """)
    op.execute("COMMENT ON TABLE profiles IS 'Clients and contractors — balance unit: cents';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS profiles CASCADE;")
