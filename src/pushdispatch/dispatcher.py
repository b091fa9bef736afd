"""
Dispatch bus - one ingestion point fanned out to four independent lanes.

Each lane:
- inbox: unbounded queue, so submit() never blocks and never loses an envelope
- intake: predicate filter, then (update lane only) one enrichment task per envelope
- render: handlers run one at a time on the lane's own worker thread

A slow or failing lane never delays the others.
"""

import asyncio
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Awaitable, Callable, Optional, Protocol

from pushdispatch import classifier, presenters
from pushdispatch.classifier import Category
from pushdispatch.config import Config
from pushdispatch.enrichment import UpdateFetcher, fetch_update_with_envelope
from pushdispatch.images import HttpImageLoader, ImageLoader
from pushdispatch.models.alert import AlertDescription
from pushdispatch.models.envelope import PushNotificationEnvelope
from pushdispatch.models.update import EnvelopeUpdatePair
from pushdispatch.presenters import AlertStyle
from pushdispatch.sink import NotificationSink
from pushdispatch.transport.api import ApiClient
from pushdispatch.transport.http import HttpClient
from pushdispatch.transport.registrar import DeviceRegistrar

logger = logging.getLogger(__name__)


class DeviceRegistrarType(Protocol):
    async def register_device(self) -> None: ...


class Lane:
    def __init__(
        self,
        name: str,
        accepts: Callable[[PushNotificationEnvelope], bool],
        render: Callable[[Any], None],
        enrich: Optional[Callable[[PushNotificationEnvelope], Awaitable[Any]]] = None,
    ):
        self.name = name
        self._accepts = accepts
        self._render = render
        self._enrich = enrich
        self._inbox: asyncio.Queue[PushNotificationEnvelope] = asyncio.Queue()
        self._ready: asyncio.Queue[Any] = asyncio.Queue()
        self._pending: set[asyncio.Task] = set()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"push-{name}")
        self._tasks: list[asyncio.Task] = []
        self._closed = False

    def start(self) -> None:
        self._tasks = [
            asyncio.ensure_future(self._intake()),
            asyncio.ensure_future(self._drain()),
        ]

    def offer(self, envelope: PushNotificationEnvelope) -> None:
        if not self._closed:
            self._inbox.put_nowait(envelope)

    async def _intake(self) -> None:
        while True:
            envelope = await self._inbox.get()
            try:
                if not self._accepts(envelope):
                    continue
                if self._enrich is None:
                    self._ready.put_nowait(envelope)
                else:
                    task = asyncio.ensure_future(self._enrich_one(envelope))
                    self._pending.add(task)
                    task.add_done_callback(self._pending.discard)
            except Exception:
                logger.exception(f"[{self.name}] intake failed for envelope {envelope.signature}")
            finally:
                self._inbox.task_done()

    async def _enrich_one(self, envelope: PushNotificationEnvelope) -> None:
        try:
            result = await self._enrich(envelope)  # type: ignore[misc]
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception(f"[{self.name}] enrichment failed for envelope {envelope.signature}")
            return
        if result is None:
            return
        if self._closed:
            logger.debug(f"[{self.name}] discarding enrichment for {envelope.signature} after shutdown")
            return
        self._ready.put_nowait(result)

    async def _drain(self) -> None:
        loop = asyncio.get_running_loop()
        while True:
            item = await self._ready.get()
            try:
                await loop.run_in_executor(self._executor, self._render, item)
            except Exception:
                logger.exception(f"[{self.name}] render failed")
            finally:
                self._ready.task_done()

    async def flush(self) -> None:
        """Wait until everything offered so far has been rendered or dropped."""
        await self._inbox.join()
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
        await self._ready.join()

    async def close(self) -> None:
        self._closed = True
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks = []
        self._executor.shutdown(wait=False)


class AsyncPushNotifications:
    """Async dispatch bus (primary). Must be initialized on the loop it will run on."""

    def __init__(
        self,
        client: UpdateFetcher,
        registrar: DeviceRegistrarType,
        sink: NotificationSink,
        image_loader: Optional[ImageLoader] = None,
        style: Optional[AlertStyle] = None,
    ):
        self._client = client
        self._registrar = registrar
        self._sink = sink
        self._image_loader = image_loader
        self._style = style or AlertStyle()
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._lanes: dict[Category, Lane] = {}
        self._registration: Optional[asyncio.Task] = None
        self._closed = False
        self._owned_http: Optional[HttpClient] = None
        self._owned_image_loader: Optional[HttpImageLoader] = None

    @classmethod
    def from_config(cls, config: Config, sink: NotificationSink) -> "AsyncPushNotifications":
        http = HttpClient(base_url=config.base_url, token=config.access_token, timeout=config.request_timeout)
        image_loader = HttpImageLoader(timeout=config.image_timeout)
        bus = cls(
            client=ApiClient(http),
            registrar=DeviceRegistrar(http, device_token=config.device_token, app_id=config.app_id),
            sink=sink,
            image_loader=image_loader,
            style=AlertStyle(small_icon=config.small_icon, color=config.color),
        )
        bus._owned_http = http
        bus._owned_image_loader = image_loader
        return bus

    @property
    def running(self) -> bool:
        return self._loop is not None and not self._closed

    async def initialize(self) -> None:
        if self._loop is not None:
            return
        self._loop = asyncio.get_running_loop()
        self._lanes = {
            Category.FRIEND_FOLLOW: Lane(
                Category.FRIEND_FOLLOW.value,
                classifier.is_friend_follow,
                self._display_friend_follow,
            ),
            Category.PROJECT_ACTIVITY: Lane(
                Category.PROJECT_ACTIVITY.value,
                classifier.is_project_activity,
                self._display_project_activity,
            ),
            Category.PROJECT_REMINDER: Lane(
                Category.PROJECT_REMINDER.value,
                classifier.is_project_reminder,
                self._display_project_reminder,
            ),
            Category.PROJECT_UPDATE: Lane(
                Category.PROJECT_UPDATE.value,
                classifier.is_project_update_activity,
                self._display_project_update,
                enrich=self._fetch_update_with_envelope,
            ),
        }
        for lane in self._lanes.values():
            lane.start()
        self._registration = asyncio.ensure_future(self._register_device())

    def submit(self, envelope: PushNotificationEnvelope) -> None:
        """Accept an envelope from any thread. Never blocks, never raises."""
        loop = self._loop
        if loop is None or self._closed:
            logger.debug(f"Ignoring envelope {envelope.signature}: dispatcher not running")
            return
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is loop:
            self._fan_out(envelope)
            return
        try:
            loop.call_soon_threadsafe(self._fan_out, envelope)
        except RuntimeError:
            logger.debug(f"Ignoring envelope {envelope.signature}: event loop closed")

    def _fan_out(self, envelope: PushNotificationEnvelope) -> None:
        if self._closed:
            return
        for lane in self._lanes.values():
            lane.offer(envelope)

    async def flush(self) -> None:
        await asyncio.gather(*(lane.flush() for lane in self._lanes.values()))

    async def shutdown(self) -> None:
        if self._closed:
            return
        self._closed = True
        await asyncio.gather(*(lane.close() for lane in self._lanes.values()))
        if self._owned_image_loader is not None:
            self._owned_image_loader.close()
        if self._owned_http is not None:
            await self._owned_http.close()

    async def _register_device(self) -> None:
        try:
            await self._registrar.register_device()
        except Exception as e:
            logger.error(f"Device registration failed: {e}")

    async def _fetch_update_with_envelope(
        self, envelope: PushNotificationEnvelope,
    ) -> Optional[EnvelopeUpdatePair]:
        return await fetch_update_with_envelope(self._client, envelope)

    # Lane handlers - run on each lane's worker thread.

    def _display_friend_follow(self, envelope: PushNotificationEnvelope) -> None:
        self._post(envelope.signature, presenters.build_friend_follow(envelope, self._style))

    def _display_project_activity(self, envelope: PushNotificationEnvelope) -> None:
        self._post(envelope.signature, presenters.build_project_activity(envelope, self._style))

    def _display_project_reminder(self, envelope: PushNotificationEnvelope) -> None:
        self._post(envelope.signature, presenters.build_project_reminder(envelope, self._style))

    def _display_project_update(self, pair: EnvelopeUpdatePair) -> None:
        self._post(pair.envelope.signature, presenters.build_project_update(pair, self._style))

    def _post(self, signature: int, alert: Optional[AlertDescription]) -> None:
        if alert is None:
            logger.debug(f"Dropping malformed envelope {signature}")
            return
        if self._closed:
            logger.debug(f"Discarding alert {signature} after shutdown")
            return
        if alert.large_image is not None and self._image_loader is not None:
            try:
                bitmap = self._image_loader.load(alert.large_image)
            except Exception as e:
                logger.error(f"Failed to load large icon: {e}")
                bitmap = None
            if bitmap is not None:
                alert = alert.model_copy(update={"large_icon": bitmap})
        if self._closed:
            logger.debug(f"Discarding alert {signature} after shutdown")
            return
        self._sink.notify(signature, alert)


class PushNotifications:
    """Sync wrapper around AsyncPushNotifications. Runs the bus on a private loop thread."""

    def __init__(self, bus: Optional[AsyncPushNotifications] = None, **kwargs: Any):
        self._async = bus or AsyncPushNotifications(**kwargs)
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._loop.run_forever, name="push-dispatch", daemon=True)

    @classmethod
    def from_config(cls, config: Config, sink: NotificationSink) -> "PushNotifications":
        return cls(bus=AsyncPushNotifications.from_config(config, sink))

    def _run(self, coro: Any, timeout: Optional[float] = None) -> Any:
        return asyncio.run_coroutine_threadsafe(coro, self._loop).result(timeout)

    @property
    def running(self) -> bool:
        return self._async.running

    def initialize(self) -> None:
        """Start the bus. Instances are single-use: after shutdown() this does nothing."""
        if self._loop.is_closed():
            logger.debug("Ignoring initialize() after shutdown")
            return
        if not self._thread.is_alive():
            self._thread.start()
        self._run(self._async.initialize())

    def submit(self, envelope: PushNotificationEnvelope) -> None:
        self._async.submit(envelope)

    def flush(self, timeout: Optional[float] = None) -> None:
        self._run(self._async.flush(), timeout)

    def shutdown(self) -> None:
        if not self._thread.is_alive():
            return
        self._run(self._async.shutdown())
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join()
        self._loop.close()
