import re
from datetime import UTC, datetime

from ordering.order.identifiers import generate_order_id, generate_tracking_number

_FORMAT = r"{}-\d+-[A-Z0-9]{{9}}"


def test_order_id_format():
    assert re.fullmatch(_FORMAT.format("ORD"), generate_order_id())


def test_tracking_number_format():
    assert re.fullmatch(_FORMAT.format("TRK"), generate_tracking_number())


def test_embeds_epoch_millis():
    now = datetime(2025, 1, 1, tzinfo=UTC)
    assert generate_order_id(now).split("-")[1] == str(int(now.timestamp() * 1000))


def test_suffixes_differ():
    now = datetime.now(UTC)
    assert len({generate_order_id(now) for _ in range(50)}) == 50
