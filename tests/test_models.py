import pytest

from voteledger.models import (
    Block,
    BlockType,
    Citizen,
    IntegrityError,
    LedgerError,
    ValidationError,
    Vote,
    calculate_hash,
)


def _citizen():
    return Citizen(id=7, name="Ali Khan", address="Street 1", cnic="AB123", age=30)


def _vote():
    return Vote(voter_cnic="AB123", candidate_cnic="CD456")


def test_block_type_values_match_source():
    registration = Block(index=0, type=0, timestamp=1, citizen=_citizen())
    voting = Block(index=1, type=1, timestamp=1, vote=_vote())
    assert registration.type is BlockType.REGISTRATION
    assert voting.type is BlockType.VOTING
    assert int(registration.type) == 0
    assert int(voting.type) == 1


def test_hash_is_deterministic_decimal_within_64_bits():
    h1 = calculate_hash(0, _citizen(), Vote(), 1000, "", BlockType.REGISTRATION)
    h2 = calculate_hash(0, _citizen(), Vote(), 1000, "", BlockType.REGISTRATION)
    assert h1 == h2
    assert h1.isdigit()
    assert 0 <= int(h1) < 2**64


def test_int_and_enum_block_type_give_same_hash():
    a = calculate_hash(3, Citizen(), _vote(), 50, "x", 1)
    b = calculate_hash(3, Citizen(), _vote(), 50, "x", BlockType.VOTING)
    assert a == b


@pytest.mark.parametrize(
    "change",
    [
        {"index": 1},
        {"timestamp": 1001},
        {"prev_hash": "abc"},
    ],
)
def test_header_fields_change_hash(change):
    base = dict(index=0, timestamp=1000, prev_hash="")
    before = calculate_hash(
        base["index"], _citizen(), Vote(), base["timestamp"], base["prev_hash"], 0
    )
    base.update(change)
    after = calculate_hash(
        base["index"], _citizen(), Vote(), base["timestamp"], base["prev_hash"], 0
    )
    assert before != after


@pytest.mark.parametrize("attr,value", [
    ("id", 8),
    ("name", "Ali Kahn"),
    ("address", "Street 2"),
    ("cnic", "AB124"),
    ("age", 31),
])
def test_registration_hash_covers_every_citizen_field(attr, value):
    original = _citizen()
    changed = _citizen()
    setattr(changed, attr, value)
    assert calculate_hash(0, original, Vote(), 5, "", 0) != calculate_hash(
        0, changed, Vote(), 5, "", 0
    )


def test_registration_hash_ignores_vote_payload():
    a = calculate_hash(0, _citizen(), Vote(), 5, "", BlockType.REGISTRATION)
    b = calculate_hash(0, _citizen(), _vote(), 5, "", BlockType.REGISTRATION)
    assert a == b


def test_voting_hash_ignores_citizen_payload():
    a = calculate_hash(2, Citizen(), _vote(), 5, "p", BlockType.VOTING)
    b = calculate_hash(2, _citizen(), _vote(), 5, "p", BlockType.VOTING)
    assert a == b


def test_voting_hash_covers_candidate():
    other = Vote(voter_cnic="AB123", candidate_cnic="ZZ999")
    assert calculate_hash(2, Citizen(), _vote(), 5, "p", 1) != calculate_hash(
        2, Citizen(), other, 5, "p", 1
    )


def test_fields_are_concatenated_without_separator():
    # index 1 + timestamp 23 reads the same as index 12 + timestamp 3
    a = calculate_hash(1, Citizen(), _vote(), 23, "", BlockType.VOTING)
    b = calculate_hash(12, Citizen(), _vote(), 3, "", BlockType.VOTING)
    assert a == b


def test_block_computes_its_own_hash():
    block = Block(index=0, type=BlockType.REGISTRATION, timestamp=99, citizen=_citizen())
    assert block.hash == calculate_hash(0, _citizen(), Vote(), 99, "", 0)
    assert block.hash == block.compute_hash()


def test_block_keeps_given_hash_and_detects_tampering():
    block = Block(index=1, type=BlockType.VOTING, timestamp=99, prev_hash="h", vote=_vote())
    stored = block.hash
    block.vote.candidate_cnic = "XX000"
    assert block.hash == stored
    assert block.compute_hash() != stored


def test_block_accepts_int_type():
    block = Block(index=0, type=1, timestamp=1, vote=_vote())
    assert block.type is BlockType.VOTING


def test_block_rejects_unknown_type():
    with pytest.raises(ValueError):
        Block(index=0, type=5, timestamp=1)


def test_default_payloads_are_empty_and_independent():
    a = Block(index=0, type=BlockType.VOTING, timestamp=1)
    b = Block(index=1, type=BlockType.VOTING, timestamp=1)
    a.citizen.name = "changed"
    assert b.citizen.name == ""
    assert a.vote == Vote("", "")


def test_error_hierarchy():
    validation = ValidationError("bad")
    integrity = IntegrityError("broken")
    assert isinstance(validation, LedgerError)
    assert isinstance(integrity, LedgerError)
    assert str(validation) == "bad"
    assert str(integrity) == "broken"
    assert not isinstance(validation, IntegrityError)
    assert not isinstance(integrity, ValidationError)