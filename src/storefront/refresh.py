"""Background refresh of the order list while an orders view is open."""

from collections.abc import Callable

import structlog
from apscheduler.schedulers import SchedulerNotRunningError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from shared.settings import get_settings
from storefront.client import ApiError

logger = structlog.get_logger(__name__)

REFRESH_JOB_ID = "order_refresh"


class OrderRefresher:
    """Re-fetch orders on a fixed interval between ``start()`` and ``stop()``.

    ``fetch`` returns the current orders and ``on_update`` receives them. A
    failed fetch is reported to ``on_error`` and the schedule carries on,
    except for an authentication failure, which stops refreshing since no
    later attempt can succeed.

    Usable as a context manager so the schedule lives exactly as long as the
    view that owns it.
    """

    def __init__(
        self,
        fetch: Callable[[], list],
        on_update: Callable[[list], None],
        interval: float | None = None,
        on_error: Callable[[Exception], None] | None = None,
    ):
        self.fetch = fetch
        self.on_update = on_update
        self.on_error = on_error
        self.interval = interval if interval is not None else get_settings().REFRESH_INTERVAL_SECONDS
        self._scheduler: BackgroundScheduler | None = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> None:
        """Begin refreshing. Calling ``start()`` on a running refresher does nothing."""
        if self.running:
            return

        scheduler = BackgroundScheduler(daemon=True)
        # First run one interval from now; the view has just loaded its orders
        scheduler.add_job(
            self._refresh_job,
            IntervalTrigger(seconds=self.interval),
            id=REFRESH_JOB_ID,
            name="Order list refresh",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        scheduler.start()
        self._scheduler = scheduler
        logger.debug("order_refresh_started", interval=self.interval)

    def stop(self, wait: bool = True) -> None:
        scheduler, self._scheduler = self._scheduler, None
        if scheduler is None:
            return
        try:
            scheduler.shutdown(wait=wait)
        except SchedulerNotRunningError:
            return
        logger.debug("order_refresh_stopped")

    def refresh_once(self) -> bool:
        """Fetch and publish once. Returns ``False`` when refreshing should stop."""
        try:
            orders = self.fetch()
        except ApiError as exc:
            logger.warning("order_refresh_failed", error=exc.message, status_code=exc.status_code)
            if self.on_error is not None:
                self.on_error(exc)
            return not exc.is_auth_error
        self.on_update(orders)
        return True

    def _refresh_job(self) -> None:
        if not self.refresh_once():
            # Runs on a scheduler worker, which cannot wait for itself
            self.stop(wait=False)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
