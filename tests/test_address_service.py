import pytest

from foodbuddy_users.domain.errors import (
    AddressNotFoundOrNotOwned,
    UserNotFound,
    ValidationFailure,
)

ADDRESS = {"street_name": "1 Main St", "locality": "Centre", "state": "KA", "pincode": "560001"}


@pytest.fixture()
def owners(account_service):
    ann = account_service.signup(email="a@x.com", password="pw1")
    bob = account_service.signup(email="b@x.com", password="pw2")
    return ann.id, bob.id


def test_add_and_list(address_service, owners):
    ann, bob = owners

    address = address_service.add_address(ann, **ADDRESS)

    assert [a.id for a in address_service.get_addresses(ann)] == [address.id]
    assert address_service.get_addresses(bob) == []


def test_add_for_unknown_user(address_service):
    with pytest.raises(UserNotFound):
        address_service.add_address("usr_missing", **ADDRESS)


def test_edit_own_address(address_service, owners):
    ann, _ = owners
    address = address_service.add_address(ann, **ADDRESS)

    address_service.edit_address(ann, address.id, **{**ADDRESS, "state": "TN"})

    assert address_service.get_addresses(ann)[0].state == "TN"


def test_foreign_and_missing_addresses_fail_identically(address_service, owners):
    ann, bob = owners
    address = address_service.add_address(ann, **ADDRESS)

    with pytest.raises(AddressNotFoundOrNotOwned) as foreign_edit:
        address_service.edit_address(bob, address.id, **ADDRESS)
    with pytest.raises(AddressNotFoundOrNotOwned) as missing_edit:
        address_service.edit_address(ann, "addr_missing", **ADDRESS)
    with pytest.raises(AddressNotFoundOrNotOwned) as foreign_delete:
        address_service.delete_address(bob, address.id)
    with pytest.raises(AddressNotFoundOrNotOwned) as missing_delete:
        address_service.delete_address(ann, "addr_missing")

    assert str(foreign_edit.value) == str(missing_edit.value)
    assert str(foreign_delete.value) == str(missing_delete.value)
    assert address_service.get_addresses(ann)[0].street_name == "1 Main St"


def test_delete_own_address(address_service, owners):
    ann, _ = owners
    address = address_service.add_address(ann, **ADDRESS)

    address_service.delete_address(ann, address.id)

    assert address_service.get_addresses(ann) == []


def test_ids_are_required(address_service):
    with pytest.raises(ValidationFailure):
        address_service.get_addresses("")
    with pytest.raises(ValidationFailure):
        address_service.delete_address("usr_1", " ")
