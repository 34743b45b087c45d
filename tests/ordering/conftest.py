from uuid import uuid4

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture()
def user_id():
    return str(uuid4())


@pytest.fixture()
def items():
    return [
        {"product_id": "SKU-001", "name": "Runner X2000", "size": 10, "price": 129.99, "quantity": 2},
    ]


@pytest.fixture()
def address():
    return {
        "name": "John Doe",
        "street": "123 Main Street",
        "city": "New York",
        "state": "NY",
        "zip_code": "10001",
    }
