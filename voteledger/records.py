"""Off-chain snapshots of the ledger, with sorting and stack/queue views."""

from __future__ import annotations

from bisect import insort
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import islice

from voteledger.blockchain import Blockchain
from voteledger.models import BlockType

MAX_BLOCKS = 100

BUBBLE_TITLE = "Sorted Data by CNIC (Using Bubble Sort)"
INSERTION_TITLE = "Sorted Data by CNIC (Using INSERTION Sort)"
SELECTION_TITLE = "Sorted Data by CNIC (Using SELECTION Sort)"
STACK_TITLE = "Stack View (LIFO)"
QUEUE_TITLE = "Queue View (FIFO)"


@dataclass(frozen=True)
class BlockRecord:
    """A copy of the fields of one block, detached from the chain."""

    index: int
    cnic: str
    name: str
    type: BlockType


def _cnic(record: BlockRecord) -> str:
    return record.cnic


def export_records(
    chain: Blockchain, limit: int = MAX_BLOCKS
) -> list[BlockRecord]:
    """Snapshot at most ``limit`` blocks of ``chain``, newest first.

    Voting blocks carry the voter's CNIC and the name "N/A".
    """
    records = []
    for block in islice(chain, limit):
        if block.type is BlockType.REGISTRATION:
            cnic, name = block.citizen.cnic, block.citizen.name
        else:
            cnic, name = block.vote.voter_cnic, "N/A"
        records.append(BlockRecord(block.index, cnic, name, block.type))
    return records


def bubble_sort(records: Iterable[BlockRecord]) -> list[BlockRecord]:
    """Records ordered by CNIC with bubble sort; stops once a pass swaps nothing."""
    items = list(records)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j].cnic > items[j + 1].cnic:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(records: Iterable[BlockRecord]) -> list[BlockRecord]:
    """Records ordered by CNIC with insertion sort; equal CNICs keep their order."""
    result: list[BlockRecord] = []
    for record in records:
        insort(result, record, key=_cnic)
    return result


def selection_sort(records: Iterable[BlockRecord]) -> list[BlockRecord]:
    """Records ordered by CNIC with selection sort, swapping each minimum into place."""
    items = list(records)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=lambda j: items[j].cnic)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def stack_view(records: Iterable[BlockRecord]) -> list[BlockRecord]:
    """Records in the order they leave a stack they were pushed onto: last in, first out."""
    stack = list(records)
    popped = []
    while stack:
        popped.append(stack.pop())
    return popped


def queue_view(records: Iterable[BlockRecord]) -> list[BlockRecord]:
    """Records in the order they leave a queue: first in, first out."""
    queue = deque(records)
    served = []
    while queue:
        served.append(queue.popleft())
    return served


def format_record(record: BlockRecord) -> str:
    """One record as a single display line."""
    kind = "Registration" if record.type is BlockType.REGISTRATION else "Voting"
    return (
        f"Index: {record.index} | CNIC: {record.cnic} "
        f"| Name: {record.name} | Type: {kind}"
    )


def format_records(title: str, records: Iterable[BlockRecord]) -> str:
    """A titled listing of records, one line each."""
    lines = [f"\n--- {title} ---"]
    lines += [format_record(record) for record in records]
    return "".join(line + "\n" for line in lines)