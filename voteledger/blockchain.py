"""The ledger itself: an append-only chain of registration and voting blocks."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from os import PathLike

from voteledger.models import (
    Block,
    BlockType,
    Citizen,
    IntegrityError,
    ValidationError,
    Vote,
)

CNIC_LENGTH = 5

_DISPLAY_RULE = "------------------------"
_DISPLAY_END = "-----------------------------------"
_REPORT_BANNER = "==============================="


def _ctime(timestamp: int) -> str:
    return time.ctime(timestamp)


def check_candidate(voter_cnic: str, candidate_cnic: str) -> None:
    """Reject a vote a citizen would cast for themselves."""
    if candidate_cnic == voter_cnic:
        raise ValidationError("Cannot vote for yourself!")


def format_vote_verification(block: Block) -> str:
    """Describe the vote held by a voting block."""
    return (
        "\n=== VOTE VERIFICATION ===\n"
        f"Voter CNIC: {block.vote.voter_cnic}\n"
        f"Voted for: {block.vote.candidate_cnic}\n"
        f"Block Index: {block.index}\n"
        f"Timestamp: {_ctime(block.timestamp)}\n"
    )


class Blockchain:
    """Chain of blocks; iteration runs from the newest block to the oldest."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.time
        self._blocks: list[Block] = []

    def __iter__(self) -> Iterator[Block]:
        return reversed(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def _append(self, block_type: BlockType, **payload) -> Block:
        prev_hash = self._blocks[-1].hash if self._blocks else ""
        block = Block(
            index=len(self._blocks),
            type=block_type,
            timestamp=int(self._clock()),
            prev_hash=prev_hash,
            **payload,
        )
        self._blocks.append(block)
        return block

    def add_registration(self, citizen: Citizen) -> Block:
        """Append a registration block for ``citizen``."""
        return self._append(BlockType.REGISTRATION, citizen=citizen)

    def add_vote(self, vote: Vote) -> Block:
        """Append a voting block for ``vote``."""
        return self._append(BlockType.VOTING, vote=vote)

    def find_citizen(self, cnic: str) -> Block | None:
        """Newest registration block for ``cnic``, if any."""
        return next(
            (
                b
                for b in self
                if b.type is BlockType.REGISTRATION and b.citizen.cnic == cnic
            ),
            None,
        )

    def find_vote(self, voter_cnic: str) -> Block | None:
        """Newest voting block cast by ``voter_cnic``, if any."""
        return next(
            (
                b
                for b in self
                if b.type is BlockType.VOTING and b.vote.voter_cnic == voter_cnic
            ),
            None,
        )

    def is_cnic_unique(self, cnic: str) -> bool:
        return self.find_citizen(cnic) is None

    def is_registered_voter(self, cnic: str) -> bool:
        return self.find_citizen(cnic) is not None

    def has_already_voted(self, cnic: str) -> bool:
        return self.find_vote(cnic) is not None

    def check_new_cnic(self, cnic: str) -> None:
        """Reject a CNIC of the wrong length or one already registered."""
        if len(cnic) != CNIC_LENGTH:
            raise ValidationError(
                f"CNIC must be exactly {CNIC_LENGTH} characters"
            )
        if not self.is_cnic_unique(cnic):
            raise ValidationError("This CNIC is already registered")

    def check_voter(self, cnic: str) -> None:
        """Reject a voter who is not registered or has voted already."""
        if not self.is_registered_voter(cnic):
            raise ValidationError("Not a registered voter!")
        if self.has_already_voted(cnic):
            raise ValidationError("This voter has already cast a vote!")

    def verify(self) -> None:
        """Check hashes and links; raise IntegrityError on the first fault.

        Each block that has an older neighbour is rehashed and its link to
        that neighbour checked.
        """
        newest_first = list(self)
        for current, older in zip(newest_first, newest_first[1:]):
            if current.hash != current.compute_hash():
                raise IntegrityError(
                    f"Hash mismatch at Block Index: {current.index}"
                )
            if current.prev_hash != older.hash:
                raise IntegrityError(
                    f"Invalid link between Block {current.index} "
                    f"and Block {older.index}"
                )

    def display_text(self) -> str:
        """The chain as shown on screen, newest block first."""
        lines: list[str] = []
        for block in self:
            lines += [
                _DISPLAY_RULE,
                f"Block Index: {block.index}",
                f"Timestamp: {_ctime(block.timestamp)}",
                f"Hash: {block.hash}",
                f"Previous Hash: {block.prev_hash}",
                "BlockType: ",
            ]
            if block.type is BlockType.REGISTRATION:
                c = block.citizen
                lines += [
                    "**Registration**",
                    f"Citizen ID: {c.id}",
                    f"Citizen Name: {c.name}",
                    f"Citizen Address: {c.address}",
                    f"Citizen CNIC: {c.cnic}",
                    f"Citizen Age: {c.age}",
                ]
            else:
                lines += [
                    "**Voting**",
                    f"Voter CNIC: {block.vote.voter_cnic}",
                    f"Candidate CNIC: {block.vote.candidate_cnic}",
                ]
            lines.append(_DISPLAY_END)
        return "".join(line + "\n" for line in lines)

    def report_text(self) -> str:
        """The chain in the layout written to the report file."""
        parts: list[str] = []
        for block in self:
            lines = [
                _REPORT_BANNER,
                "        BLOCK DETAILS          ",
                _REPORT_BANNER,
                f"Block Index     : {block.index}",
                f"Timestamp       : {_ctime(block.timestamp)}",
            ]
            if block.type is BlockType.REGISTRATION:
                c = block.citizen
                lines += [
                    "Block Type      : REGISTRATION",
                    f"Citizen ID      : {c.id}",
                    f"Name            : {c.name}",
                    f"Address         : {c.address}",
                    f"CNIC            : {c.cnic}",
                    f"Age             : {c.age}",
                ]
            else:
                lines += [
                    "Block Type      : VOTING",
                    f"Voter CNIC      : {block.vote.voter_cnic}",
                    f"Candidate CNIC  : {block.vote.candidate_cnic}",
                ]
            lines += [
                f"Hash            : {block.hash}",
                f"Previous Hash   : {block.prev_hash}",
            ]
            parts.append("".join(line + "\n" for line in lines))
            parts.append("\n-----------------------------------\n\n")
        return "".join(parts)

    def save(self, path: str | PathLike[str]) -> None:
        """Write the report to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.report_text())