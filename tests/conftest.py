import pytest

from restolink.models import Address, RestaurantRecord


def make_record(name: str = "Restaurant", **kwargs) -> RestaurantRecord:
    """Build a RestaurantRecord with only the fields a test cares about."""
    address = kwargs.pop("address", None)
    if isinstance(address, dict):
        address = Address(**address)
    return RestaurantRecord(name=name, address=address, **kwargs)


@pytest.fixture
def record_factory():
    return make_record
