import pytest

from homefinancials.commons import DatabaseError, NotFoundError
from homefinancials.models import Family, Member
from homefinancials.net_worth import NetWorth
from homefinancials.storage import Storage


@pytest.fixture
def storage(tmp_path):
    with Storage(tmp_path / "networth_class_test.db") as store:
        yield store


def test_member_net_worth_sum(storage):
    storage.save_family(Family("NetFamilyClass"))
    family_id = storage.list_families()[0].id
    member_id = storage.save_member(Member("Alice", "A"), family_id)
    bank_id = storage.get_bank_id_by_name("Canara")

    storage.save_bank_account(bank_id, member_id, "ACC1", 10000, 15000)
    storage.save_bank_account(bank_id, member_id, "ACC2", 5000, 25000)

    assert NetWorth(storage).member_net_worth(member_id) == 40000


def test_family_net_worth_sum(storage):
    storage.save_family(Family("FamilyTotalClass"))
    family_id = storage.list_families()[0].id
    id1 = storage.save_member(Member("Bob", "B"), family_id)
    id2 = storage.save_member(Member("Carol", "C"), family_id)
    bank_id = storage.get_bank_id_by_name("SBI")

    storage.save_bank_account(bank_id, id1, "BACC", 0, 1000)
    storage.save_bank_account(bank_id, id2, "CACC1", 0, 2000)
    storage.save_bank_account(bank_id, id2, "CACC2", 0, 3000)

    assert NetWorth(storage).family_net_worth(family_id) == 6000


def test_member_not_found(storage):
    with pytest.raises(NotFoundError):
        NetWorth(storage).member_net_worth(9999)


def test_family_not_found(storage):
    with pytest.raises(NotFoundError):
        NetWorth(storage).family_net_worth(9999)


def test_member_without_accounts_is_zero(storage):
    family_id = storage.save_family(Family("Empty"))
    member_id = storage.save_member(Member("Dan"), family_id)
    assert NetWorth(storage).member_net_worth(member_id) == 0


def test_family_without_members_is_zero(storage):
    family_id = storage.save_family(Family("Nobody"))
    assert NetWorth(storage).family_net_worth(family_id) == 0


def test_family_total_excludes_other_families(storage):
    bank_id = storage.get_bank_id_by_name("canara")
    first = storage.save_family(Family("First"))
    second = storage.save_family(Family("Second"))
    m1 = storage.save_member(Member("Eve"), first)
    m2 = storage.save_member(Member("Finn"), second)
    storage.save_bank_account(bank_id, m1, "X1", 0, 700)
    storage.save_bank_account(bank_id, m2, "X2", 0, 300)

    net_worth = NetWorth(storage)
    assert net_worth.family_net_worth(first) == 700
    assert net_worth.family_net_worth(second) == 300


def test_negative_balances_are_summed(storage):
    bank_id = storage.get_bank_id_by_name("HDFC")
    family_id = storage.save_family(Family("Debt"))
    member_id = storage.save_member(Member("Gus"), family_id)
    storage.save_bank_account(bank_id, member_id, "D1", 0, -2500)
    storage.save_bank_account(bank_id, member_id, "D2", 0, 1000)
    assert NetWorth(storage).member_net_worth(member_id) == -1500


def test_missing_storage_raises_database_error():
    with pytest.raises(DatabaseError):
        NetWorth(None).member_net_worth(1)
    with pytest.raises(DatabaseError):
        NetWorth(None).family_net_worth(1)