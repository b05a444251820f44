from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
	pass


class CurrencyDB(Base):
	__tablename__ = 'currencies'

	code: Mapped[str] = mapped_column(String(10), primary_key=True)
	display_name: Mapped[str] = mapped_column(String(50), nullable=False)
	symbol: Mapped[str | None] = mapped_column(String(10), nullable=True)
	is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
	created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
	updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

	__table_args__ = (Index('idx_currencies_is_active', 'is_active'),)
