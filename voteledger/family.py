"""Off-chain family tree linking registered citizens as parents and children."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

from voteledger.blockchain import Blockchain
from voteledger.models import LedgerError, ValidationError


@dataclass(eq=False)
class FamilyNode:
    """One person in the family records."""

    cnic: str
    name: str
    parent: FamilyNode | None = None
    children: list[FamilyNode] = field(default_factory=list)

    @property
    def label(self) -> str:
        return f"{self.name} ({self.cnic})"


class FamilyTree:
    """Family relationships between citizens registered on a chain."""

    def __init__(self, chain: Blockchain) -> None:
        self._chain = chain
        self.nodes: list[FamilyNode] = []

    def find(self, cnic: str) -> FamilyNode | None:
        """The node recorded for ``cnic``, if any."""
        return next((node for node in self.nodes if node.cnic == cnic), None)

    def _find_or_create(self, cnic: str) -> FamilyNode:
        node = self.find(cnic)
        if node is None:
            block = self._chain.find_citizen(cnic)
            name = block.citizen.name if block is not None else ""
            node = FamilyNode(cnic, name)
            self.nodes.append(node)
        return node

    def add_relationship(
        self, child_cnic: str, parent_cnic: str | None = None
    ) -> FamilyNode:
        """Record ``child_cnic``, and link it to ``parent_cnic`` if one is given.

        Both people must be registered on the chain. Returns the child's node.
        """
        if not self._chain.is_registered_voter(child_cnic):
            raise ValidationError("Child CNIC not registered!")
        if parent_cnic and not self._chain.is_registered_voter(parent_cnic):
            raise ValidationError("Parent CNIC not registered!")

        child = self._find_or_create(child_cnic)
        if not parent_cnic:
            return child

        parent = self._find_or_create(parent_cnic)
        child.parent = parent
        parent.children.append(child)
        return child

    def root_of(self, cnic: str) -> FamilyNode:
        """The eldest recorded ancestor of ``cnic``."""
        person = self.find(cnic)
        if person is None:
            raise LedgerError("Person not found in family records!")
        root = person
        seen = {id(root)}
        while root.parent is not None:
            root = root.parent
            if id(root) in seen:
                raise LedgerError("Family records contain a cycle")
            seen.add(id(root))
        return root

    def generations(self, cnic: str) -> list[list[FamilyNode]]:
        """The family of ``cnic`` level by level, starting at its root."""
        current = [self.root_of(cnic)]
        levels: list[list[FamilyNode]] = []
        while current:
            levels.append(current)
            current = [child for member in current for child in member.children]
        return levels

    def render(self, cnic: str) -> str:
        """The family of ``cnic`` as shown on screen, one generation per level."""
        levels = self.generations(cnic)
        root = levels[0][0]
        lines = [f"\nFamily Tree for {root.label}:"]
        for level, members in enumerate(levels):
            marker = "Root: " if level == 0 else "-> "
            lines += ["  " * level + marker + member.label for member in members]
        return "".join(line + "\n" for line in lines)

    def report(self) -> str:
        """Every family, depth first from each root, in the saved-file layout."""
        parts: list[str] = []
        for root in (node for node in self.nodes if node.parent is None):
            parts.append(f"Family of {root.label}:\n")
            pending: list[tuple[FamilyNode, int]] = [(root, 0)]
            while pending:
                node, level = pending.pop()
                parts.append("  " * level + f"-> {node.label}\n")
                pending.extend((child, level + 1) for child in reversed(node.children))
            parts.append("\n")
        return "".join(parts)

    def save(self, path: str | PathLike[str]) -> None:
        """Write the family report to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.report())