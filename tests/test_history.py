import asyncio

from medipredict.config import HISTORY_WARNING
from medipredict.history import LoadStatus


def test_start_loads_initial_month(session, backend):
    asyncio.run(session.start())
    assert backend.history_calls == [1]
    assert session.history.status is LoadStatus.LOADED
    assert session.history.snapshot.month == 1
    assert session.history.snapshot.rounded() == {"Dengue": 10, "Road_Accidents": 43}


def test_each_month_change_fetches_exactly_once(session, backend):
    async def scenario():
        for month in [*range(2, 13), 1]:
            await session.set_month(month)
            assert session.history.snapshot.month == month
        await session.set_month(1)

    asyncio.run(scenario())
    assert backend.history_calls == [*range(2, 13), 1]


def test_refresh_refetches_current_month(session, backend):
    async def scenario():
        await session.set_month(4)
        await session.refresh_history()

    asyncio.run(scenario())
    assert backend.history_calls == [4, 4]


def test_stale_success_is_discarded(session, backend):
    async def scenario():
        backend.gates[3] = asyncio.Event()
        slow = asyncio.create_task(session.set_month(3))
        await asyncio.sleep(0)
        await session.set_month(4)
        backend.gates[3].set()
        assert await slow is None

    asyncio.run(scenario())
    assert backend.history_calls == [3, 4]
    assert session.history.snapshot.month == 4
    assert session.history.snapshot.average_cases_by_disease["Dengue"] == 40.4
    assert session.history.status is LoadStatus.LOADED


def test_stale_failure_is_discarded(session, backend):
    backend.failing_months.add(3)

    async def scenario():
        backend.gates[3] = asyncio.Event()
        slow = asyncio.create_task(session.set_month(3))
        await asyncio.sleep(0)
        await session.set_month(4)
        backend.gates[3].set()
        await slow

    asyncio.run(scenario())
    assert session.history.warning == ""
    assert session.history.snapshot.month == 4


def test_loader_is_loading_while_in_flight(session, backend):
    async def scenario():
        backend.gates[2] = asyncio.Event()
        task = asyncio.create_task(session.set_month(2))
        await asyncio.sleep(0)
        assert session.history.loading
        backend.gates[2].set()
        await task
        assert not session.history.loading

    asyncio.run(scenario())


def test_failure_clears_snapshot_and_warns(session, backend):
    backend.failing_months.add(6)

    async def scenario():
        await session.set_month(5)
        await session.set_month(6)

    asyncio.run(scenario())
    assert session.history.snapshot is None
    assert session.history.status is LoadStatus.FAILED
    assert session.history.warning == HISTORY_WARNING


def test_network_failure_warns(session, backend):
    backend.network_down = True
    asyncio.run(session.start())
    assert session.history.snapshot is None
    assert session.history.warning == HISTORY_WARNING


def test_success_after_failure_clears_warning(session, backend):
    backend.failing_months.add(2)

    async def scenario():
        await session.set_month(2)
        await session.set_month(3)

    asyncio.run(scenario())
    assert session.history.warning == ""
    assert session.history.snapshot.month == 3


def test_history_failure_does_not_block_prediction(filled_session, backend):
    backend.failing_months.add(1)
    asyncio.run(filled_session.start())
    assert asyncio.run(filled_session.submit()) is True
