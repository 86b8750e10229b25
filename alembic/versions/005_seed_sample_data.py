"""005: seed sample marketplace data

Revision ID: 005
Revises: 004
Create Date: 2026-10-18
"""

from typing import Sequence, Union

from alembic import op

revision: str = "005"
down_revision: Union[str, None] = "004"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        INSERT INTO profiles (id, first_name, last_name, profession, type, balance_cents) VALUES
            (1, 'Harry',    'Potter',    'Wizard',          'client',     115000),
            (2, 'Mr',       'Robot',     'Hacker',          'client',      23111),
            (3, 'John',     'Snow',      'Knows nothing',   'client',      45130),
            (4, 'Ash',      'Kethcum',   'Pokemon master',  'client',        130),
            (5, 'John',     'Lenon',     'Musician',        'contractor',   6400),
            (6, 'Linus',    'Torvalds',  'Programmer',      'contractor', 121400),
            (7, 'Alan',     'Turing',    'Programmer',      'contractor',   2200),
            (8, 'Aragorn',  'II Elessar','Fighter',         'contractor',  31400);
    """)
    op.execute("""
        INSERT INTO contracts (id, terms, status, client_id, contractor_id) VALUES
            (1, 'Website redesign',         'terminated',  1, 5),
            (2, 'Kernel patch review',      'in_progress', 1, 6),
            (3, 'Security audit',           'in_progress', 2, 6),
            (4, 'Cipher consulting',        'in_progress', 2, 7),
            (5, 'Castle defence',           'new',         3, 8),
            (6, 'Driver development',       'in_progress', 3, 7),
            (7, 'Battle training',          'in_progress', 4, 7),
            (8, 'Gym badge strategy',       'in_progress', 4, 6),
            (9, 'Quest planning',           'in_progress', 4, 8);
    """)
    # paid: NULL rows are legacy "unpaid"
    op.execute("""
        INSERT INTO jobs (id, description, price_cents, paid, payment_date, contract_id) VALUES
            (1,  'work', 20000, NULL,  NULL,                   1),
            (2,  'work', 20100, NULL,  NULL,                   2),
            (3,  'work', 20200, NULL,  NULL,                   3),
            (4,  'work', 20000, NULL,  NULL,                   4),
            (5,  'work', 20000, NULL,  NULL,                   7),
            (6,  'work', 200000, TRUE, '2020-08-15T19:11:26Z', 7),
            (7,  'work', 20000, TRUE,  '2020-08-15T19:11:26Z', 2),
            (8,  'work', 12100, TRUE,  '2020-08-16T19:11:26Z', 3),
            (9,  'work', 12100, TRUE,  '2020-08-17T19:11:26Z', 1),
            (10, 'work', 12100, TRUE,  '2020-08-17T19:11:26Z', 5),
            (11, 'work', 12100, TRUE,  '2020-08-14T23:11:26Z', 1),
            (12, 'work', 2000,  TRUE,  '2020-08-14T23:11:26Z', 2),
            (13, 'work', 12100, FALSE, NULL,                   8),
            (14, 'work', 12100, TRUE,  '2020-08-14T23:11:26Z', 3);
    """)
    # Explicit ids above: move the sequences past them
    op.execute("SELECT setval('profiles_id_seq', (SELECT MAX(id) FROM profiles));")
    op.execute("SELECT setval('contracts_id_seq', (SELECT MAX(id) FROM contracts));")
    op.execute("SELECT setval('jobs_id_seq', (SELECT MAX(id) FROM jobs));")


def downgrade() -> None:
    op.execute("DELETE FROM jobs WHERE id BETWEEN 1 AND 14;")
    op.execute("DELETE FROM contracts WHERE id BETWEEN 1 AND 9;")
    op.execute("DELETE FROM profiles WHERE id BETWEEN 1 AND 8;")
