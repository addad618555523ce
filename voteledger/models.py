"""Core records of the ledger: citizens, votes, blocks and their hashing."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from enum import IntEnum


class BlockType(IntEnum):
    """Kind of payload a block carries."""

    REGISTRATION = 0
    VOTING = 1


@dataclass
class Citizen:
    """A registered citizen."""

    id: int = 0
    name: str = ""
    address: str = ""
    cnic: str = ""
    age: int = 0


@dataclass
class Vote:
    """A vote cast by one citizen for a candidate."""

    voter_cnic: str = ""
    candidate_cnic: str = ""


class LedgerError(Exception):
    """Base class for ledger errors."""


class ValidationError(LedgerError):
    """Input was rejected by one of the ledger's rules."""


class IntegrityError(LedgerError):
    """The chain failed verification."""


def _digest(text: str) -> str:
    raw = hashlib.blake2b(text.encode("utf-8"), digest_size=8).digest()
    return str(int.from_bytes(raw, "big"))


def calculate_hash(
    index: int,
    citizen: Citizen,
    vote: Vote,
    timestamp: int,
    prev_hash: str,
    block_type: BlockType | int,
) -> str:
    """Hash a block's fields into an unsigned 64-bit decimal string.

    Only the payload matching ``block_type`` takes part in the hash.
    """
    kind = int(block_type)
    parts = [str(index), str(int(timestamp)), prev_hash, str(kind)]
    if kind == BlockType.REGISTRATION:
        parts += [
            str(citizen.id),
            citizen.name,
            citizen.cnic,
            citizen.address,
            str(citizen.age),
        ]
    elif kind == BlockType.VOTING:
        parts += [vote.voter_cnic, vote.candidate_cnic]
    return _digest("".join(parts))


@dataclass
class Block:
    """One link of the chain.

    When no hash is given, it is computed from the block's fields.
    """

    index: int
    type: BlockType
    timestamp: int
    prev_hash: str = ""
    citizen: Citizen = field(default_factory=Citizen)
    vote: Vote = field(default_factory=Vote)
    hash: str = ""

    def __post_init__(self) -> None:
        self.type = BlockType(self.type)
        if not self.hash:
            self.hash = self.compute_hash()

    def compute_hash(self) -> str:
        """Recompute the hash from the block's current contents."""
        return calculate_hash(
            self.index,
            self.citizen,
            self.vote,
            self.timestamp,
            self.prev_hash,
            self.type,
        )