"""Task ordering on a single CPU, debt settlement and round-trip detection in flight logs."""

import bisect
import heapq
import itertools
from collections import defaultdict
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Task:
    """A job with an identifier, the time it takes and the time it is queued."""

    task_id: int
    exec_time: int
    queue_time: int


def execution_order(tasks):
    """Order in which a single CPU runs ``tasks``, always taking the shortest queued job.

    The clock starts at zero and advances only by execution times; when
    nothing is queued the next task in queue order is taken.
    """
    pending = sorted(tasks, key=lambda t: (t.queue_time, t.exec_time))
    if not pending:
        return []
    counter = itertools.count()
    ready = []

    def push(task):
        heapq.heappush(ready, (task.exec_time, task.queue_time, next(counter), task))

    upcoming = iter(pending)
    push(next(upcoming))
    upcoming = list(upcoming)
    idx = 0
    now = 0
    order = []
    while ready:
        task = heapq.heappop(ready)[-1]
        now += task.exec_time
        order.append(task)
        while idx < len(upcoming) and upcoming[idx].queue_time <= now:
            push(upcoming[idx])
            idx += 1
        if not ready and idx < len(upcoming):
            push(upcoming[idx])
            idx += 1
    return order


def enqueue_tasks(tasks):
    """Identifiers of tasks run shortest-first from time zero.

    Only tasks queued by the time the CPU becomes free are run; once no
    task is waiting, the remaining ones are never started.
    """
    waiting = sorted(tasks, key=lambda t: t.queue_time)
    counter = itertools.count()
    ready = []
    idx = 0
    now = 0
    result = []
    while True:
        while idx < len(waiting) and waiting[idx].queue_time <= now:
            task = waiting[idx]
            heapq.heappush(ready, (task.exec_time, next(counter), task))
            idx += 1
        if not ready:
            return result
        task = heapq.heappop(ready)[-1]
        result.append(task.task_id)
        now += task.exec_time


def settle_debts(transactions):
    """Payments that settle ``(payer, payee, amount)`` transactions.

    The person owing most pays the person owed most, repeatedly. Returns a
    list of ``(debtor, amount, creditor)`` triples.
    """
    net = defaultdict(int)
    for payer, payee, amount in transactions:
        net[payer] -= amount
        net[payee] += amount
    counter = itertools.count()
    balances = sorted(
        (amount, next(counter), name) for name, amount in sorted(net.items()) if amount
    )
    settlements = []
    while balances:
        debit, _, debtor = balances.pop(0)
        if not balances:
            raise ValueError("balances do not sum to zero")
        credit, _, creditor = balances.pop()
        amount = min(-debit, credit)
        settlements.append((debtor, amount, creditor))
        if debit + amount:
            bisect.insort(balances, (debit + amount, next(counter), debtor))
        if credit - amount:
            bisect.insort(balances, (credit - amount, next(counter), creditor))
    return settlements


@dataclass(frozen=True)
class FlightRecord:
    """One flight: date, traveller, origin and destination."""

    date: str
    person: str
    origin: str
    destination: str


def parse_flight_record(line) -> Optional[FlightRecord]:
    """Parse ``date person from to``; None if the line has fewer than four fields."""
    fields = line.split()
    if len(fields) < 4:
        return None
    return FlightRecord(*fields[:4])


def round_trip_people(lines):
    """People who later fly back to where their first flight started, once per return."""
    origins = {}
    people = []
    for line in lines:
        record = parse_flight_record(line)
        if record is None:
            continue
        if record.person not in origins:
            origins[record.person] = record.origin
        elif origins[record.person] == record.destination:
            people.append(record.person)
    return people


def round_trip_people_from_file(path):
    """``round_trip_people`` for the lines of the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return round_trip_people(handle)