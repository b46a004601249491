"""rename legacy underscored site setting keys to dotted keys

Revision ID: 0002_canonical_setting_keys
Revises: 0001_initial
Create Date: 2025-11-30 04:39:08
"""
from alembic import op
import sqlalchemy as sa

revision = "0002_canonical_setting_keys"
down_revision = "0001_initial"
branch_labels = None
depends_on = None

LEGACY_KEYS = {
    "company_name": "general.site_name",
    "tag_line": "general.tagline",
    "logo_url": "general.logo",
    "contact_email": "contact.email",
    "contact_phone": "contact.phone",
    "contact_address": "contact.address",
}

site_settings = sa.table(
    "site_settings",
    sa.column("key", sa.String),
    sa.column("group", sa.String),
    sa.column("is_deleted", sa.Boolean),
)


def _rename(conn, old, new):
    other = site_settings.alias("other")
    taken = (
        sa.select(other.c.key)
        .where(other.c.key == new, other.c.is_deleted == sa.false())
        .exists()
    )
    # A live canonical row wins; the legacy row is left for manual cleanup
    conn.execute(
        site_settings.update()
        .where(site_settings.c.key == old, site_settings.c.is_deleted == sa.false(), ~taken)
        .values(key=new, group=new.split(".", 1)[0])
    )


def _mapping(conn):
    mapping = dict(LEGACY_KEYS)
    rows = conn.execute(sa.select(site_settings.c.key).where(site_settings.c.is_deleted == sa.false()))
    for (key,) in rows:
        if key.startswith("social_"):
            mapping[key] = "social." + key[len("social_"):]
    return mapping


def upgrade():
    conn = op.get_bind()
    for old, new in _mapping(conn).items():
        _rename(conn, old, new)


def downgrade():
    # Dotted keys are what the application reads; there is nothing to restore
    pass
