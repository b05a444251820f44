from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from domain.exceptions.currency import CurrencyAlreadyExistsError
from domain.models.currency import Currency
from infrastructure.persistence.models.currency import CurrencyDB


class CurrencyRepository:
	def __init__(self, db_session: AsyncSession):
		self.db_session = db_session

	@staticmethod
	def _to_domain(row: CurrencyDB) -> Currency:
		return Currency(
			code=row.code,
			display_name=row.display_name,
			symbol=row.symbol,
			is_active=row.is_active,
			created_at=row.created_at,
			updated_at=row.updated_at,
		)

	@staticmethod
	def _to_row(currency: Currency) -> CurrencyDB:
		return CurrencyDB(
			code=currency.code,
			display_name=currency.display_name,
			symbol=currency.symbol,
			is_active=currency.is_active,
			created_at=currency.created_at,
			updated_at=currency.updated_at,
		)

	async def find_by_code(self, code: str, for_update: bool = False) -> Currency | None:
		stmt = select(CurrencyDB).filter(CurrencyDB.code == code)
		if for_update:
			stmt = stmt.with_for_update()
		row = (await self.db_session.execute(stmt)).scalars().first()
		return self._to_domain(row) if row else None

	async def find_active_by_code(self, code: str, for_update: bool = False) -> Currency | None:
		stmt = select(CurrencyDB).filter(CurrencyDB.code == code, CurrencyDB.is_active.is_(True))
		if for_update:
			stmt = stmt.with_for_update()
		row = (await self.db_session.execute(stmt)).scalars().first()
		return self._to_domain(row) if row else None

	async def find_all(self) -> list[Currency]:
		result = await self.db_session.execute(select(CurrencyDB).order_by(CurrencyDB.code))
		return [self._to_domain(r) for r in result.scalars().all()]

	async def find_all_active(self) -> list[Currency]:
		stmt = select(CurrencyDB).filter(CurrencyDB.is_active.is_(True)).order_by(CurrencyDB.code)
		result = await self.db_session.execute(stmt)
		return [self._to_domain(r) for r in result.scalars().all()]

	async def search_active_by_display_name(self, name: str) -> list[Currency]:
		stmt = (
			select(CurrencyDB)
			.filter(
				CurrencyDB.is_active.is_(True),
				CurrencyDB.display_name.contains(name, autoescape=True),
			)
			.order_by(CurrencyDB.code)
		)
		result = await self.db_session.execute(stmt)
		# LIKE is case-insensitive on some engines; containment must match case exactly.
		return [self._to_domain(r) for r in result.scalars().all() if name in r.display_name]

	async def add(self, currency: Currency) -> Currency:
		"""Insert a new record; a code that is already stored is a conflict."""
		row = self._to_row(currency)
		self.db_session.add(row)
		try:
			await self.db_session.flush()
		except IntegrityError as e:
			await self.db_session.rollback()
			raise CurrencyAlreadyExistsError(f"Currency with code '{currency.code}' already exists.") from e
		return self._to_domain(row)

	async def save(self, currency: Currency) -> Currency:
		row = await self.db_session.merge(self._to_row(currency))
		await self.db_session.flush()
		return self._to_domain(row)
