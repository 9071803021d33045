"""
Refresh coordinator for the product dashboard.

Owns the product list and decides when it is fetched. A background timer
refreshes the list on a fixed interval, user actions (create, update,
delete, manual refresh) run in the foreground and always end with a full
refetch. Background ticks are skipped while the user is interacting with a
dialog or while the dashboard is hidden.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Optional, Protocol

from app.constants.dashboard import DefaultMessage, PollingState
from app.core.config import settings
from app.schemas.products import (
    DashboardState,
    IdResult,
    Product,
    ProductRequest,
)
from app.services.product_store import ProductStoreError

logger = logging.getLogger(__name__)


class ProductStore(Protocol):
    async def list_products(self) -> List[Product]: ...

    async def create_product(self, request: ProductRequest) -> IdResult: ...

    async def update_product(self, product_id: str,
                             request: ProductRequest) -> None: ...

    async def delete_product(self, product_id: str) -> None: ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def error_message(exc: Exception, default: str) -> str:
    """Message to show for a failed store call."""
    if isinstance(exc, ProductStoreError) and exc.message:
        return exc.message
    return default


class RefreshCoordinator:
    """
    Single authority over when the product list is fetched.

    Must be driven from one event loop. The interaction flag is a plain
    boolean: the last caller to clear it wins.
    """

    def __init__(self, store: ProductStore, interval: float = None,
                 clock: Callable[[], datetime] = None):
        self.store = store
        self.interval = (interval if interval is not None
                         else settings.polling_interval_seconds)
        self._clock = clock or _utcnow

        self.products: List[Product] = []
        self.error: Optional[str] = None
        self.is_polling = True
        self.last_refresh: Optional[datetime] = None
        self.is_user_interacting = False
        self.is_visible = True

        self._foreground = 0
        self._timer: Optional[asyncio.Task] = None
        self._generation = 0
        self._disposed = False

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def loading(self) -> bool:
        """True while any foreground fetch or mutation is in flight."""
        return self._foreground > 0

    @property
    def polling_state(self) -> str:
        if self._timer is not None and not self._timer.done():
            return PollingState.ARMED
        return PollingState.STOPPED

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def state(self) -> DashboardState:
        return DashboardState(
            products=list(self.products),
            loading=self.loading,
            error=self.error,
            is_polling=self.is_polling,
            last_refresh=self.last_refresh,
            is_visible=self.is_visible,
            polling_state=self.polling_state,
        )

    def _is_current(self, generation: int) -> bool:
        return not self._disposed and generation == self._generation

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def fetch(self, foreground: bool = True) -> bool:
        """
        Replace the product list with the store's current list.

        Foreground fetches drive ``loading`` and report failures through
        ``error``. Background fetches leave both untouched and drop
        failures after logging them.

        Returns:
            True when the list was replaced.
        """
        generation = self._generation
        if foreground:
            self._foreground += 1
            self.error = None
        try:
            products = await self.store.list_products()
        except Exception as e:
            if not self._is_current(generation):
                return False
            if foreground:
                logger.error(f"Product fetch failed: {e}")
                self.error = error_message(e, DefaultMessage.FETCH)
            else:
                logger.warning(f"Background product refresh failed: {e}")
            return False
        finally:
            if foreground:
                self._foreground -= 1

        if not self._is_current(generation):
            logger.debug("Dropping product list received after dispose")
            return False
        self.products = list(products)
        self.last_refresh = self._clock()
        logger.debug(f"Product list refreshed ({len(self.products)} items, "
                     f"foreground={foreground})")
        return True

    async def manual_refresh(self) -> bool:
        # Explicit user action: runs even while polling is suppressed.
        return await self.fetch(foreground=True)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def _mutate(self, call: Callable[[], Awaitable[object]],
                      default_message: str) -> bool:
        generation = self._generation
        self.is_user_interacting = True
        self._foreground += 1
        self.error = None
        try:
            await call()
            if not self._is_current(generation):
                return False
            await self.fetch(foreground=True)
            return True
        except Exception as e:
            if self._is_current(generation):
                logger.error(f"{default_message}: {e}")
                self.error = error_message(e, default_message)
            return False
        finally:
            self._foreground -= 1
            self.is_user_interacting = False

    async def create(self, request: ProductRequest) -> bool:
        return await self._mutate(
            lambda: self.store.create_product(request),
            DefaultMessage.CREATE)

    async def update(self, product_id: str, request: ProductRequest) -> bool:
        return await self._mutate(
            lambda: self.store.update_product(product_id, request),
            DefaultMessage.UPDATE)

    async def delete(self, product_id: str) -> bool:
        return await self._mutate(
            lambda: self.store.delete_product(product_id),
            DefaultMessage.DELETE)

    # ------------------------------------------------------------------
    # Suppression and polling control
    # ------------------------------------------------------------------

    def set_user_interacting(self, interacting: bool) -> None:
        self.is_user_interacting = interacting

    def clear_error(self) -> None:
        self.error = None

    def toggle_polling(self) -> bool:
        """Flip polling. Turning it on waits for the next tick to fetch."""
        self.is_polling = not self.is_polling
        if self.is_polling:
            if self.is_visible:
                self._arm()
        else:
            self._disarm()
        logger.info(f"Auto-refresh {'enabled' if self.is_polling else 'disabled'}")
        return self.is_polling

    def set_visible(self, visible: bool) -> None:
        """Hidden stops the timer but keeps ``is_polling`` for resume."""
        if visible == self.is_visible:
            return
        self.is_visible = visible
        if not visible:
            self._disarm()
        elif self.is_polling:
            self._arm()

    def _should_poll(self) -> bool:
        return (not self._disposed
                and self.is_polling
                and self.is_visible
                and not self.is_user_interacting)

    async def tick(self) -> bool:
        """
        One polling tick. Returns True when a background fetch was issued.
        """
        if not self._should_poll():
            logger.debug("Polling tick skipped")
            return False
        await self.fetch(foreground=False)
        return True

    async def _poll_loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            # Stopping the timer must not abort a fetch already on the wire.
            await asyncio.shield(self.tick())

    def _arm(self) -> None:
        if self._disposed:
            return
        self._disarm()
        self._timer = asyncio.get_running_loop().create_task(self._poll_loop())

    def _disarm(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Initial foreground fetch, then arm the timer."""
        await self.fetch(foreground=True)
        if self.is_polling and self.is_visible:
            self._arm()

    def dispose(self) -> None:
        self._disposed = True
        self._generation += 1
        self._disarm()
        logger.info("Refresh coordinator disposed")
