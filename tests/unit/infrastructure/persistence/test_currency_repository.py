# nosec B101


from datetime import datetime

import pytest

from domain.exceptions.currency import CurrencyAlreadyExistsError
from domain.models.currency import Currency
from infrastructure.persistence.repositories.currency import CurrencyRepository


NOW = datetime(2024, 9, 2, 7, 0, 0)


def make_currency(code: str, display_name: str, symbol: str | None = None, active: bool = True) -> Currency:
    return Currency(
        code=code,
        display_name=display_name,
        symbol=symbol,
        is_active=active,
        created_at=NOW,
        updated_at=NOW,
    )


@pytest.mark.asyncio
async def test_save_then_find_by_code(db_session):
    repo = CurrencyRepository(db_session=db_session)

    saved = await repo.save(make_currency('USD', 'US Dollar', '$'))
    found = await repo.find_by_code('USD')

    assert saved == found
    assert found.symbol == '$'
    assert found.is_active is True


@pytest.mark.asyncio
async def test_find_by_code_missing_returns_none(db_session):
    repo = CurrencyRepository(db_session=db_session)

    assert await repo.find_by_code('XXX') is None


@pytest.mark.asyncio
async def test_save_upserts_existing_record(db_session):
    repo = CurrencyRepository(db_session=db_session)
    await repo.save(make_currency('USD', 'US Dollar', '$'))

    await repo.save(make_currency('USD', 'American Dollar', None))
    found = await repo.find_by_code('USD')

    assert found.display_name == 'American Dollar'
    assert found.symbol is None
    assert len(await repo.find_all()) == 1


@pytest.mark.asyncio
async def test_add_inserts_new_record(db_session):
    repo = CurrencyRepository(db_session=db_session)

    added = await repo.add(make_currency('USD', 'US Dollar', '$'))

    assert added == await repo.find_by_code('USD')


@pytest.mark.asyncio
async def test_add_existing_code_raises_already_exists(database):
    async with database.session() as session:
        await CurrencyRepository(db_session=session).add(make_currency('USD', 'US Dollar', '$'))

    with pytest.raises(CurrencyAlreadyExistsError):
        async with database.session() as session:
            await CurrencyRepository(db_session=session).add(make_currency('USD', 'Other Dollar'))

    async with database.session() as session:
        found = await CurrencyRepository(db_session=session).find_by_code('USD')
    assert found.display_name == 'US Dollar'


@pytest.mark.asyncio
async def test_active_queries_skip_inactive_records(db_session):
    repo = CurrencyRepository(db_session=db_session)
    await repo.save(make_currency('USD', 'US Dollar'))
    await repo.save(make_currency('EUR', 'Euro', active=False))

    assert [c.code for c in await repo.find_all_active()] == ['USD']
    assert await repo.find_active_by_code('EUR') is None
    assert (await repo.find_by_code('EUR')).is_active is False
    assert {c.code for c in await repo.find_all()} == {'USD', 'EUR'}


@pytest.mark.asyncio
async def test_find_active_by_code_for_update(db_session):
    repo = CurrencyRepository(db_session=db_session)
    await repo.save(make_currency('GBP', 'British Pound'))

    found = await repo.find_active_by_code('GBP', for_update=True)

    assert found.code == 'GBP'


@pytest.mark.asyncio
async def test_search_is_case_sensitive_containment(db_session):
    repo = CurrencyRepository(db_session=db_session)
    await repo.save(make_currency('USD', 'US Dollar'))
    await repo.save(make_currency('AUD', 'Australian Dollar'))
    await repo.save(make_currency('CAD', 'Canadian Dollar', active=False))
    await repo.save(make_currency('EUR', 'Euro'))

    assert [c.code for c in await repo.search_active_by_display_name('Dollar')] == ['AUD', 'USD']
    assert await repo.search_active_by_display_name('dollar') == []


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(db_session):
    repo = CurrencyRepository(db_session=db_session)
    await repo.save(make_currency('USD', 'US Dollar'))
    await repo.save(make_currency('PCT', '100% Token'))

    assert [c.code for c in await repo.search_active_by_display_name('%')] == ['PCT']
    assert await repo.search_active_by_display_name('U_') == []
