"""Billboard model: banner image shown above storefront categories."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.models.base import Base

if TYPE_CHECKING:
    from storeadmin.models.category import Category
    from storeadmin.models.store import Store


class Billboard(Base):
    __tablename__ = "billboards"

    store_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("stores.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    label: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)

    store: Mapped["Store"] = relationship("Store", back_populates="billboards")
    categories: Mapped[list["Category"]] = relationship(
        "Category",
        back_populates="billboard",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"<Billboard {self.label}>"
