"""004: create jobs table

Revision ID: 004
Revises: 003
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # paid is nullable on purpose: legacy rows use NULL for "not yet paid"
    op.execute("""
        CREATE TABLE jobs (
            id              SERIAL          PRIMARY KEY,
            description     TEXT            NOT NULL,
            price_cents     BIGINT          NOT NULL,
            paid            BOOLEAN,
            payment_date    TIMESTAMPTZ,
            contract_id     INTEGER         NOT NULL REFERENCES contracts (id),
            created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_jobs_price_gt_0   CHECK (price_cents > 0),
            CONSTRAINT ck_jobs_paid_has_date
                CHECK (paid IS NOT TRUE OR payment_date IS NOT NULL)
        );
    """)
    op.execute("CREATE INDEX idx_jobs_contract ON jobs (contract_id);")
    op.execute(
        "CREATE INDEX idx_jobs_paid_payment_date ON jobs (payment_date) WHERE paid IS TRUE;"
    )
    op.execute("""
        CREATE TRIGGER trg_jobs_updated_at
            BEFORE UPDATE ON jobs
            FOR EACH ROW EXECUTE FUNCTION fn_update_timestamp();
    """)
    op.execute("COMMENT ON TABLE jobs IS 'Billable work under a contract — price unit: cents';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS jobs CASCADE;")
