from collections import defaultdict

import pytest

from puzzlebox.scheduling import (
    FlightRecord,
    Task,
    enqueue_tasks,
    execution_order,
    parse_flight_record,
    round_trip_people,
    round_trip_people_from_file,
    settle_debts,
)


def test_execution_order_source_example():
    tasks = [Task(1, 4, 1), Task(2, 3, 3), Task(3, 2, 4)]
    assert [t.task_id for t in execution_order(tasks)] == [1, 3, 2]


def test_execution_order_empty():
    assert execution_order([]) == []


def test_execution_order_runs_every_task_once():
    tasks = [Task(i, i % 3 + 1, i * 5) for i in range(6)]
    order = execution_order(tasks)
    assert sorted(order, key=lambda t: t.task_id) == tasks


def test_enqueue_tasks_source_example():
    tasks = [Task(0, 7, 0), Task(1, 2, 0), Task(2, 3, 3), Task(3, 9, 5)]
    assert enqueue_tasks(tasks) == [1, 0, 2, 3]


def test_enqueue_tasks_nothing_at_start():
    assert enqueue_tasks([Task(0, 1, 5)]) == []


def test_settle_single_transaction():
    assert settle_debts([("A", "B", 100)]) == [("A", 100, "B")]


def test_settle_balanced_gives_nothing():
    assert settle_debts([("A", "B", 10), ("B", "A", 10)]) == []


def test_settle_cancels_all_balances():
    transactions = [("A", "B", 30), ("C", "B", 20), ("B", "D", 5), ("D", "A", 12)]
    net = defaultdict(int)
    for payer, payee, amount in transactions:
        net[payer] -= amount
        net[payee] += amount
    settlements = settle_debts(transactions)
    for debtor, amount, creditor in settlements:
        assert amount > 0
        net[debtor] += amount
        net[creditor] -= amount
    assert all(value == 0 for value in net.values())
    assert len(settlements) < len(net)


def test_parse_flight_record():
    record = parse_flight_record("2020-01-01 alice NYC LAX extra")
    assert record == FlightRecord("2020-01-01", "alice", "NYC", "LAX")
    assert parse_flight_record("2020-01-01 alice NYC") is None


LINES = [
    "d1 alice NYC LAX",
    "d2 bob SFO NYC",
    "",
    "d3 alice LAX NYC",
    "d4 bob NYC BOS",
    "d5 alice NYC NYC",
]


def test_round_trip_people():
    assert round_trip_people(LINES) == ["alice", "alice"]


def test_round_trip_people_from_file(tmp_path):
    path = tmp_path / "flights.txt"
    path.write_text("\n".join(LINES) + "\n", encoding="utf-8")
    assert round_trip_people_from_file(path) == ["alice", "alice"]


def test_round_trip_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        round_trip_people_from_file(tmp_path / "missing.txt")