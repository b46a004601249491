"""initial content schema

Revision ID: 0001_initial
Revises:
Create Date: 2025-11-28 17:04:04
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

NOT_DELETED = sa.text("NOT is_deleted")


def _entity_columns():
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def _display_order():
    return sa.Column("display_order", sa.Integer(), nullable=False, server_default="0")


def _create(table, *columns):
    op.create_table(table, *_entity_columns(), *columns, sa.PrimaryKeyConstraint("id", name=f"pk_{table}"))
    op.create_index(f"ix_{table}_is_deleted", table, ["is_deleted"])


def _unique_live(name, table, columns, where=NOT_DELETED):
    op.create_index(name, table, columns, unique=True, postgresql_where=where, sqlite_where=where)


def upgrade():
    _create(
        "product_categories",
        _display_order(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("image_data", sa.LargeBinary(), nullable=True),
        sa.Column("image_content_type", sa.String(50), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("parent_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["parent_id"], ["product_categories.id"], ondelete="RESTRICT",
                                name="fk_product_categories_parent_id_product_categories"),
    )
    _unique_live("ux_product_categories_slug", "product_categories", ["slug"])

    _create(
        "products",
        _display_order(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("short_description", sa.String(500), nullable=False, server_default=""),
        sa.Column("full_description", sa.Text(), nullable=True),
        sa.Column("unit", sa.String(50), nullable=True),
        sa.Column("base_price", sa.Numeric(18, 2), nullable=False),
        sa.Column("discounted_price", sa.Numeric(18, 2), nullable=True),
        sa.Column("image_data", sa.LargeBinary(), nullable=True),
        sa.Column("image_content_type", sa.String(50), nullable=True),
        sa.Column("product_category_id", sa.Uuid(), nullable=False),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("stock_quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("season_start", sa.String(20), nullable=True),
        sa.Column("season_end", sa.String(20), nullable=True),
        sa.Column("meta_title", sa.String(100), nullable=True),
        sa.Column("meta_description", sa.String(300), nullable=True),
        sa.ForeignKeyConstraint(["product_category_id"], ["product_categories.id"], ondelete="RESTRICT",
                                name="fk_products_product_category_id_product_categories"),
    )
    op.create_index("ix_products_product_category_id", "products", ["product_category_id"])
    _unique_live("ux_products_slug", "products", ["slug"])

    _create(
        "product_variants",
        _display_order(),
        sa.Column("product_id", sa.Uuid(), nullable=False),
        sa.Column("size", sa.String(50), nullable=False),
        sa.Column("unit", sa.String(20), nullable=False),
        sa.Column("price", sa.Numeric(18, 2), nullable=False),
        sa.Column("discounted_price", sa.Numeric(18, 2), nullable=True),
        sa.Column("stock_quantity", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("sku", sa.String(50), nullable=True),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_in_stock", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="CASCADE",
                                name="fk_product_variants_product_id_products"),
    )
    op.create_index("ix_product_variants_product_id", "product_variants", ["product_id"])
    _unique_live("ux_product_variants_sku", "product_variants", ["sku"],
                 where=sa.text("sku IS NOT NULL AND NOT is_deleted"))

    _create(
        "product_features",
        _display_order(),
        sa.Column("product_id", sa.Uuid(), nullable=False),
        sa.Column("feature", sa.String(200), nullable=False),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="CASCADE",
                                name="fk_product_features_product_id_products"),
    )
    op.create_index("ix_product_features_product_id", "product_features", ["product_id"])

    _create(
        "product_images",
        _display_order(),
        sa.Column("product_id", sa.Uuid(), nullable=False),
        sa.Column("image_data", sa.LargeBinary(), nullable=True),
        sa.Column("image_content_type", sa.String(50), nullable=True),
        sa.Column("alt_text", sa.String(200), nullable=True),
        sa.Column("is_primary", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="CASCADE",
                                name="fk_product_images_product_id_products"),
    )
    op.create_index("ix_product_images_product_id", "product_images", ["product_id"])

    _create(
        "hero_slides",
        _display_order(),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("subtitle", sa.String(200), nullable=True),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("highlight_text", sa.String(50), nullable=True),
        sa.Column("image_data", sa.LargeBinary(), nullable=True),
        sa.Column("image_content_type", sa.String(50), nullable=True),
        sa.Column("gradient_start", sa.String(10), nullable=True),
        sa.Column("gradient_middle", sa.String(10), nullable=True),
        sa.Column("gradient_end", sa.String(10), nullable=True),
        sa.Column("cta_text", sa.String(50), nullable=True),
        sa.Column("cta_link", sa.String(200), nullable=True),
        sa.Column("product_id", sa.Uuid(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="SET NULL",
                                name="fk_hero_slides_product_id_products"),
    )
    op.create_index("ix_hero_slides_product_id", "hero_slides", ["product_id"])

    _create(
        "hero_slide_features",
        _display_order(),
        sa.Column("hero_slide_id", sa.Uuid(), nullable=False),
        sa.Column("feature", sa.String(100), nullable=False),
        sa.ForeignKeyConstraint(["hero_slide_id"], ["hero_slides.id"], ondelete="CASCADE",
                                name="fk_hero_slide_features_hero_slide_id_hero_slides"),
    )
    op.create_index("ix_hero_slide_features_hero_slide_id", "hero_slide_features", ["hero_slide_id"])

    _create(
        "testimonials",
        _display_order(),
        sa.Column("customer_name", sa.String(100), nullable=False),
        sa.Column("customer_title", sa.String(100), nullable=True),
        sa.Column("customer_location", sa.String(100), nullable=True),
        sa.Column("customer_image_data", sa.LargeBinary(), nullable=True),
        sa.Column("customer_image_content_type", sa.String(50), nullable=True),
        sa.Column("content", sa.String(1000), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False, server_default="5"),
        sa.Column("product_purchased", sa.String(200), nullable=True),
        sa.Column("is_approved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_testimonials_rating"),
    )

    _create(
        "site_settings",
        sa.Column("key", sa.String(100), nullable=False),
        sa.Column("value", sa.Text(), nullable=False, server_default=""),
        sa.Column("setting_type", sa.String(20), nullable=False, server_default="string"),
        sa.Column("group", sa.String(50), nullable=False, server_default="general"),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_site_settings_group", "site_settings", ["group"])
    _unique_live("ux_site_settings_key", "site_settings", ["key"])

    _create(
        "content_blocks",
        _display_order(),
        sa.Column("block_key", sa.String(100), nullable=False),
        sa.Column("page", sa.String(50), nullable=False),
        sa.Column("section", sa.String(50), nullable=False),
        sa.Column("title", sa.String(200), nullable=True),
        sa.Column("subtitle", sa.String(500), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("content_type", sa.String(20), nullable=False, server_default="text"),
        sa.Column("metadata", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_content_blocks_page_section", "content_blocks", ["page", "section"])
    _unique_live("ux_content_blocks_block_key", "content_blocks", ["block_key"])

    _create(
        "statistics",
        _display_order(),
        sa.Column("label", sa.String(100), nullable=False),
        sa.Column("value", sa.String(50), nullable=False),
        sa.Column("suffix", sa.String(20), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("section", sa.String(50), nullable=False, server_default="home"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_statistics_section", "statistics", ["section"])

    _create(
        "usp_items",
        _display_order(),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )

    _create(
        "company_story_sections",
        _display_order(),
        sa.Column("section_key", sa.String(50), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("subtitle", sa.String(500), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("image_data", sa.LargeBinary(), nullable=True),
        sa.Column("image_content_type", sa.String(50), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    _unique_live("ux_company_story_sections_section_key", "company_story_sections", ["section_key"])

    _create(
        "company_story_items",
        _display_order(),
        sa.Column("section_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(200), nullable=True),
        sa.Column("description", sa.String(1000), nullable=False),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.ForeignKeyConstraint(["section_id"], ["company_story_sections.id"], ondelete="CASCADE",
                                name="fk_company_story_items_section_id_company_story_sections"),
    )
    op.create_index("ix_company_story_items_section_id", "company_story_items", ["section_id"])

    _create(
        "inquiry_types",
        _display_order(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("value", sa.String(50), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )

    _create(
        "delivery_settings",
        sa.Column("free_delivery_threshold", sa.Numeric(18, 2), nullable=False),
        sa.Column("standard_delivery_charge", sa.Numeric(18, 2), nullable=False),
        sa.Column("express_delivery_charge", sa.Numeric(18, 2), nullable=True),
        sa.Column("estimated_delivery_days", sa.Integer(), nullable=False, server_default="3"),
        sa.Column("express_delivery_days", sa.Integer(), nullable=True, server_default="1"),
        sa.Column("is_delivery_enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("delivery_note", sa.String(500), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )

    _create(
        "contact_submissions",
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(200), nullable=False),
        sa.Column("phone", sa.String(20), nullable=True),
        sa.Column("inquiry_type", sa.String(50), nullable=False),
        sa.Column("message", sa.String(2000), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="new"),
        sa.Column("admin_notes", sa.String(1000), nullable=True),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_contact_submissions_email", "contact_submissions", ["email"])
    op.create_index("ix_contact_submissions_status", "contact_submissions", ["status"])


def downgrade():
    for table in (
        "contact_submissions",
        "delivery_settings",
        "inquiry_types",
        "company_story_items",
        "company_story_sections",
        "usp_items",
        "statistics",
        "content_blocks",
        "site_settings",
        "testimonials",
        "hero_slide_features",
        "hero_slides",
        "product_images",
        "product_features",
        "product_variants",
        "products",
        "product_categories",
    ):
        op.drop_table(table)
