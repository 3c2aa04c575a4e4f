"""Initial schema: stores and their catalog, orders and order items.

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _common_columns() -> list[sa.Column]:  # type: ignore[type-arg]
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    ]


def _store_fk(table: str) -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(
        ["store_id"],
        ["stores.id"],
        name=op.f(f"fk_{table}_store_id_stores"),
        ondelete="RESTRICT",
    )


def upgrade() -> None:
    # Stores
    op.create_table(
        "stores",
        *_common_columns(),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_stores")),
    )
    op.create_index(op.f("ix_stores_user_id"), "stores", ["user_id"])

    # Billboards
    op.create_table(
        "billboards",
        *_common_columns(),
        sa.Column("store_id", sa.Uuid(), nullable=False),
        sa.Column("label", sa.String(255), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_billboards")),
        _store_fk("billboards"),
    )
    op.create_index(op.f("ix_billboards_store_id"), "billboards", ["store_id"])

    # Categories
    op.create_table(
        "categories",
        *_common_columns(),
        sa.Column("store_id", sa.Uuid(), nullable=False),
        sa.Column("billboard_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_categories")),
        _store_fk("categories"),
        sa.ForeignKeyConstraint(
            ["billboard_id"],
            ["billboards.id"],
            name=op.f("fk_categories_billboard_id_billboards"),
            ondelete="RESTRICT",
        ),
    )
    op.create_index(op.f("ix_categories_store_id"), "categories", ["store_id"])
    op.create_index(op.f("ix_categories_billboard_id"), "categories", ["billboard_id"])

    # Sizes and colors
    for table, value_length in (("sizes", 255), ("colors", 9)):
        op.create_table(
            table,
            *_common_columns(),
            sa.Column("store_id", sa.Uuid(), nullable=False),
            sa.Column("name", sa.String(255), nullable=False),
            sa.Column("value", sa.String(value_length), nullable=False),
            sa.PrimaryKeyConstraint("id", name=op.f(f"pk_{table}")),
            _store_fk(table),
        )
        op.create_index(op.f(f"ix_{table}_store_id"), table, ["store_id"])

    # Products
    op.create_table(
        "products",
        *_common_columns(),
        sa.Column("store_id", sa.Uuid(), nullable=False),
        sa.Column("category_id", sa.Uuid(), nullable=False),
        sa.Column("size_id", sa.Uuid(), nullable=False),
        sa.Column("color_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_archived", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_products")),
        _store_fk("products"),
        sa.ForeignKeyConstraint(
            ["category_id"],
            ["categories.id"],
            name=op.f("fk_products_category_id_categories"),
            ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["size_id"],
            ["sizes.id"],
            name=op.f("fk_products_size_id_sizes"),
            ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["color_id"],
            ["colors.id"],
            name=op.f("fk_products_color_id_colors"),
            ondelete="RESTRICT",
        ),
    )
    for column in ("store_id", "category_id", "size_id", "color_id"):
        op.create_index(op.f(f"ix_products_{column}"), "products", [column])
    op.create_index("ix_products_store_archived", "products", ["store_id", "is_archived"])

    # Images (owned by their product)
    op.create_table(
        "images",
        *_common_columns(),
        sa.Column("product_id", sa.Uuid(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_images")),
        sa.ForeignKeyConstraint(
            ["product_id"],
            ["products.id"],
            name=op.f("fk_images_product_id_products"),
            ondelete="CASCADE",
        ),
    )
    op.create_index(op.f("ix_images_product_id"), "images", ["product_id"])

    # Orders
    op.create_table(
        "orders",
        *_common_columns(),
        sa.Column("store_id", sa.Uuid(), nullable=False),
        sa.Column("is_paid", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("phone", sa.String(64), nullable=False, server_default=""),
        sa.Column("address", sa.Text(), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_orders")),
        _store_fk("orders"),
    )
    op.create_index(op.f("ix_orders_store_id"), "orders", ["store_id"])
    op.create_index("ix_orders_store_paid", "orders", ["store_id", "is_paid"])

    # Order items
    op.create_table(
        "order_items",
        *_common_columns(),
        sa.Column("order_id", sa.Uuid(), nullable=False),
        sa.Column("product_id", sa.Uuid(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_order_items")),
        sa.ForeignKeyConstraint(
            ["order_id"],
            ["orders.id"],
            name=op.f("fk_order_items_order_id_orders"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["product_id"],
            ["products.id"],
            name=op.f("fk_order_items_product_id_products"),
            ondelete="RESTRICT",
        ),
    )
    op.create_index(op.f("ix_order_items_order_id"), "order_items", ["order_id"])
    op.create_index(op.f("ix_order_items_product_id"), "order_items", ["product_id"])


def downgrade() -> None:
    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("images")
    op.drop_table("products")
    op.drop_table("colors")
    op.drop_table("sizes")
    op.drop_table("categories")
    op.drop_table("billboards")
    op.drop_table("stores")
