"""Interactive menu for registering citizens, casting votes and inspecting the ledger."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from os import PathLike
from pathlib import Path
from typing import TextIO

from voteledger.blockchain import (
    Blockchain,
    check_candidate,
    format_vote_verification,
)
from voteledger.family import FamilyTree
from voteledger.models import Citizen, IntegrityError, LedgerError, ValidationError, Vote
from voteledger.records import (
    BUBBLE_TITLE,
    INSERTION_TITLE,
    QUEUE_TITLE,
    SELECTION_TITLE,
    STACK_TITLE,
    BlockRecord,
    bubble_sort,
    export_records,
    format_records,
    insertion_sort,
    queue_view,
    selection_sort,
    stack_view,
)

CHAIN_FILE = "blockchain_data.txt"
FAMILY_FILE = "family_tree.txt"

_MENU = (
    "**********************************\n"
    "-- WELCOME TO M.STATE E-SYSTEM --\n"
    "**********************************\n"
    "1. Add new citizen (Registration)\n"
    "2. Add new vote (Voting)\n"
    "3. Display blockchain\n"
    "4. Save blockchain to file\n"
    "5. Export and sort data\n"
    "6. Display using Stack\n"
    "7. Display using Queue\n"
    "8. Verify Blockchain Integrity\n"
    "9. Verify Individual Vote\n"
    "10. Add family relationship\n"
    "11. Display family tree\n"
    "12. Save family tree to file\n"
    "0. Exit\n"
    "---\n"
)

_SORT_MENU = (
    "    a. Bubble Sort\n"
    "    b. Insertion Sort\n"
    "    c. Selection Sort\n"
)

_SORTS: dict[str, tuple[Callable, str]] = {
    "a": (bubble_sort, BUBBLE_TITLE),
    "b": (insertion_sort, INSERTION_TITLE),
    "c": (selection_sort, SELECTION_TITLE),
}


class _EndOfInput(Exception):
    """The input stream ran out."""


class Session:
    """One run of the menu, reading from ``stdin`` and writing to ``stdout``.

    Report files are written into ``workdir``.
    """

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        workdir: str | PathLike[str] = ".",
    ) -> None:
        self._in = stdin
        self._out = stdout
        self.workdir = Path(workdir)
        self.chain = Blockchain()
        self.family = FamilyTree(self.chain)
        self.records: list[BlockRecord] = []
        self._actions: dict[int, Callable[[], None]] = {
            1: self._register,
            2: self._vote,
            3: self._display,
            4: self._save_chain,
            5: self._export_and_sort,
            6: self._show_stack,
            7: self._show_queue,
            8: self._verify_chain,
            9: self._verify_vote,
            10: self._add_relationship,
            11: self._show_family,
            12: self._save_family,
        }

    # -- input helpers -------------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _line(self, prompt: str) -> str:
        self._write(prompt)
        line = self._in.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\r\n")

    def _token(self, prompt: str) -> str:
        self._write(prompt)
        while True:
            line = self._in.readline()
            if not line:
                raise _EndOfInput
            words = line.split()
            if words:
                return words[0]

    def _integer(self, prompt: str) -> int:
        while True:
            word = self._token(prompt)
            try:
                return int(word)
            except ValueError:
                self._write("Error: please enter a number\n")

    # -- menu actions --------------------------------------------------

    def _register(self) -> None:
        citizen_id = self._integer("Enter ID: ")
        name = self._line("Enter Name: ")
        address = self._line("Enter Address: ")
        while True:
            cnic = self._line("Enter CNIC (5 characters): ")
            try:
                self.chain.check_new_cnic(cnic)
            except ValidationError as exc:
                self._write(f"Error: {exc}\n")
            else:
                break
        age = self._integer("Enter Age: ")
        self.chain.add_registration(
            Citizen(id=citizen_id, name=name, address=address, cnic=cnic, age=age)
        )

    def _vote(self) -> None:
        while True:
            voter = self._token("Enter Voter CNIC: ")
            try:
                self.chain.check_voter(voter)
            except ValidationError as exc:
                self._write(f"Error: {exc}\n")
            else:
                break
        while True:
            candidate = self._token("Enter Candidate CNIC: ")
            try:
                check_candidate(voter, candidate)
            except ValidationError as exc:
                self._write(f"Error: {exc}\n")
            else:
                break
        self.chain.add_vote(Vote(voter_cnic=voter, candidate_cnic=candidate))

    def _display(self) -> None:
        self._write(self.chain.display_text())

    def _save_chain(self) -> None:
        try:
            self.chain.save(self.workdir / CHAIN_FILE)
        except OSError:
            self._write("Error opening file!\n")
            return
        self._write(f"Blockchain saved to file: {CHAIN_FILE}\n")

    def _export_and_sort(self) -> None:
        self._write(_SORT_MENU)
        exported = export_records(self.chain)
        choice = self._token("Choose sorting algorithm (a/b/c): ")[0].lower()
        if choice not in _SORTS:
            self._write("Invalid choice, using Bubble Sort\n")
            choice = "a"
        sort, title = _SORTS[choice]
        self.records = sort(exported)
        self._write(format_records(title, self.records))

    def _show_stack(self) -> None:
        self._write(format_records(STACK_TITLE, stack_view(self.records)))

    def _show_queue(self) -> None:
        self._write(format_records(QUEUE_TITLE, queue_view(self.records)))

    def _verify_chain(self) -> None:
        try:
            self.chain.verify()
        except IntegrityError as exc:
            self._write(f"{exc}\n")
        else:
            self._write("Blockchain is valid!\n")

    def _verify_vote(self) -> None:
        cnic = self._token("Enter voter CNIC to verify: ")
        block = self.chain.find_vote(cnic)
        if block is None:
            self._write(f"No vote found for CNIC: {cnic}\n")
        else:
            self._write(format_vote_verification(block))

    def _add_relationship(self) -> None:
        child = self._token("Enter child CNIC: ")
        parent = self._line("Enter parent CNIC (leave empty if none): ").strip()
        try:
            self.family.add_relationship(child, parent or None)
        except ValidationError as exc:
            self._write(f"{exc}\n")
        else:
            self._write("Family relationship added!\n")

    def _show_family(self) -> None:
        cnic = self._token("Enter CNIC to view family: ")
        try:
            self._write(self.family.render(cnic))
        except LedgerError as exc:
            self._write(f"{exc}\n")

    def _save_family(self) -> None:
        try:
            self.family.save(self.workdir / FAMILY_FILE)
        except OSError:
            self._write("Error opening family tree file!\n")
            return
        self._write(f"Family tree saved to {FAMILY_FILE}\n")

    # -- main loop -----------------------------------------------------

    def run(self) -> None:
        """Show the menu and carry out choices until 0 is chosen or input ends."""
        try:
            while True:
                self._write(_MENU)
                word = self._token("Enter choice: ")
                try:
                    choice = int(word)
                except ValueError:
                    choice = -1
                if choice == 0:
                    self._write("Exiting program.\n")
                    return
                action = self._actions.get(choice)
                if action is None:
                    self._write("Invalid option. Try again.\n")
                else:
                    action()
        except _EndOfInput:
            return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="voteledger",
        description="Citizen registration and voting ledger.",
    )
    parser.add_argument(
        "--workdir",
        default=".",
        help="directory that receives saved reports",
    )
    args = parser.parse_args(argv)
    Session(sys.stdin, sys.stdout, args.workdir).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())