# voteledger

voteledger keeps citizen registrations and votes in a hash-linked chain of
blocks. Each block stores its index, a timestamp, the hash of the block
before it and a hash of its own contents. The hash is a BLAKE2b digest,
8 bytes long, written as an unsigned decimal number.

On top of the chain it offers:

- registration with unique five-character CNICs
- voting by registered citizens only, one vote each, never for oneself
- per-voter vote verification
- an off-chain family tree that links registered citizens as parent and child
- record exports sorted by CNIC (bubble, insertion or selection sort), plus
  stack (LIFO) and queue (FIFO) views
- plain-text reports of the chain and of the family trees

## Installation

```
pip install .
```

## The console

```
voteledger
voteledger --workdir reports
```

This starts a numbered menu on standard input and output:

```
1. Add new citizen (Registration)
2. Add new vote (Voting)
3. Display blockchain
4. Save blockchain to file
5. Export and sort data
6. Display using Stack
7. Display using Queue
8. Verify Blockchain Integrity
9. Verify Individual Vote
10. Add family relationship
11. Display family tree
12. Save family tree to file
0. Exit
```

Option 4 writes `blockchain_data.txt` and option 12 writes `family_tree.txt`
into the directory given by `--workdir` (the current directory by default).
Option 5 exports at most 100 blocks, newest first, and sorts them by CNIC
with the algorithm chosen (`a`, `b` or `c`; anything else falls back to
bubble sort). Options 6 and 7 show the records from the most recent export.
Invalid entries are reported and asked for again. The session ends when 0
is chosen or the input runs out.

The same menu can be driven from code with
`voteledger.cli.Session(stdin, stdout, workdir).run()`.

## Using the library

```python
from voteledger.blockchain import Blockchain, check_candidate
from voteledger.models import Citizen, Vote
from voteledger.family import FamilyTree
from voteledger.records import BUBBLE_TITLE, bubble_sort, export_records, format_records

chain = Blockchain()
chain.check_new_cnic("AAAAA")         # raises ValidationError for a bad or taken CNIC
chain.add_registration(Citizen(id=1, name="Ayla", address="1 Main St", cnic="AAAAA", age=40))
chain.add_registration(Citizen(id=2, name="Bilal", address="1 Main St", cnic="BBBBB", age=18))

chain.check_voter("BBBBB")            # raises ValidationError if not allowed to vote
check_candidate("BBBBB", "AAAAA")     # raises ValidationError for a self-vote
chain.add_vote(Vote(voter_cnic="BBBBB", candidate_cnic="AAAAA"))

chain.verify()                        # raises IntegrityError on a bad hash or link

family = FamilyTree(chain)
family.add_relationship("BBBBB", "AAAAA")
print(family.render("BBBBB"))

records = bubble_sort(export_records(chain))
print(format_records(BUBBLE_TITLE, records))
```

The modules:

- `voteledger.models`: `Citizen`, `Vote`, `Block`, `BlockType`,
  `calculate_hash` and the errors `LedgerError`, `ValidationError` and
  `IntegrityError`.
- `voteledger.blockchain`: `Blockchain` (iterates newest block first;
  `add_registration`, `add_vote`, `find_citizen`, `find_vote`, `verify`,
  `display_text`, `report_text`, `save`), `check_candidate` and
  `format_vote_verification`. `Blockchain` takes an optional `clock`
  callable used for timestamps.
- `voteledger.family`: `FamilyTree` (`add_relationship`, `find`, `root_of`,
  `generations`, `render`, `report`, `save`) and `FamilyNode`.
- `voteledger.records`: `BlockRecord`, `export_records`, `bubble_sort`,
  `insertion_sort`, `selection_sort`, `stack_view`, `queue_view`,
  `format_record` and `format_records`.

`verify` rehashes every block that has an older block behind it and checks
its link to that block; the oldest block is not rehashed. `FamilyTree`
raises `LedgerError` for a person who is not in the family records.

## What it does not do

The chain and the family records live in memory for one session only. The
saved reports are plain text for reading; nothing loads them back.

## Running the tests

```
pip install .[test]
pytest
```