"""
Client for the Runware image inference API.

Every operation kind goes through one retry/dispatch routine:
- up to ``max_attempts`` attempts, waiting ``attempt * retry_delay`` seconds
  between them
- a per-attempt timeout that aborts the in-flight request
- synthetic progress reporting that resets on every attempt
- response normalization across the known response shapes

Failures never propagate as exceptions; callers get a GenerationResult.
"""

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional

import httpx

from ..config import Settings, is_placeholder_key
from .errors import (
    ConfigurationError,
    ErrorKind,
    GenerationCancelledError,
    GenerationError,
    GenerationTimeoutError,
    NetworkError,
    ResponseShapeError,
    ServerError,
)
from .progress import ProgressCallback, ProgressEstimator
from .response_parser import extract_error_message, extract_image_url
from .schemas import (
    ExteriorRequest,
    FreeformRequest,
    GenerationRequest,
    InpaintRequest,
    RefloorRequest,
    RepaintRequest,
    StyleTransferRequest,
    StyleTransformRequest,
)
from .variants import TaskVariant, build_task, get_variant

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Result from a generation request."""
    success: bool
    image_url: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    attempts: int = 0
    task_uuid: Optional[str] = None
    prompt_used: str = ""
    elapsed_seconds: float = 0.0


class RunwareClient:
    """
    Generation client for room, garden and exterior redesigns.

    Each call is self-contained (its own task ids, timers and HTTP client),
    so concurrent calls on one instance are safe.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        attempt_timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        retry_delay: float = 1.0,
        progress_interval: float = 0.2,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Runware API key (or set RUNWARE_API_KEY env var)
            base_url: API endpoint (or set RUNWARE_API_URL env var)
            attempt_timeout: Seconds before a single attempt is abandoned
            max_attempts: Total attempts per request, including the first
            retry_delay: Base delay; the wait after attempt N is N * retry_delay
            progress_interval: Seconds between progress samples
            transport: Custom httpx transport (tests use httpx.MockTransport)
            sleep: Coroutine used for the waits between attempts
            settings: Explicit settings instead of reading the environment
        """
        settings = settings or Settings.from_env()

        self.api_key = api_key if api_key is not None else settings.api_key
        self.base_url = base_url or settings.api_url
        self.attempt_timeout = (
            attempt_timeout if attempt_timeout is not None else settings.attempt_timeout
        )
        self.max_attempts = max(1, max_attempts if max_attempts is not None else settings.max_attempts)
        self.retry_delay = retry_delay
        self.progress_interval = progress_interval

        self._transport = transport
        self._sleep = sleep

    # Public API

    async def generate(
        self,
        request: GenerationRequest,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationResult:
        """
        Run a generation request with retries.

        Args:
            request: Any generation request model
            on_progress: Called with integer progress estimates (0-100)
            cancel_event: Setting this event aborts the in-flight attempt and
                any pending retry immediately

        Returns:
            GenerationResult; never raises for runtime failures
        """
        variant = get_variant(request.kind)
        start_time = time.monotonic()
        prompt = variant.build_prompt(request)

        logger.info("Starting %s generation with model %s", request.kind, variant.model)
        logger.debug("Prompt: %s", prompt)

        if is_placeholder_key(self.api_key):
            # Deterministic failure, retrying cannot help
            error = ConfigurationError()
            logger.error(error.message)
            return self._failure(error, 0, None, prompt, start_time)

        last_error: GenerationError = GenerationError()
        task_uuid: Optional[str] = None
        attempt = 0

        for attempt in range(1, self.max_attempts + 1):
            task_uuid = str(uuid.uuid4())
            progress = ProgressEstimator(variant.curve, on_progress, self.progress_interval)

            try:
                progress.start()
                image_url = await self._run_cancellable(
                    self._timed_attempt(variant, request, prompt, task_uuid),
                    cancel_event,
                )
            except GenerationError as exc:
                last_error = exc
            except Exception as exc:
                logger.exception("Unexpected error during %s generation", request.kind)
                last_error = GenerationError(str(exc) or None)
            else:
                progress.complete()
                elapsed = time.monotonic() - start_time
                logger.info(
                    "Generated %s image on attempt %d/%d in %.1fs",
                    request.kind, attempt, self.max_attempts, elapsed,
                )
                return GenerationResult(
                    success=True,
                    image_url=image_url,
                    attempts=attempt,
                    task_uuid=task_uuid,
                    prompt_used=prompt,
                    elapsed_seconds=elapsed,
                )
            finally:
                progress.stop()

            if last_error.kind == ErrorKind.CANCELLED:
                logger.info("%s generation cancelled on attempt %d", request.kind, attempt)
                return self._failure(last_error, attempt, task_uuid, prompt, start_time)

            logger.warning(
                "Attempt %d/%d for %s failed (%s): %s",
                attempt, self.max_attempts, request.kind, last_error.kind, last_error.message,
            )

            if attempt < self.max_attempts:
                delay = attempt * self.retry_delay
                logger.info("Retrying in %.1fs", delay)
                try:
                    await self._run_cancellable(self._sleep(delay), cancel_event)
                except GenerationCancelledError as exc:
                    logger.info("%s generation cancelled while waiting to retry", request.kind)
                    return self._failure(exc, attempt, task_uuid, prompt, start_time)

        logger.error(
            "%s generation failed after %d attempts: %s",
            request.kind, attempt, last_error.message,
        )
        return self._failure(last_error, attempt, task_uuid, prompt, start_time)

    async def generate_style_transform(
        self,
        request: StyleTransformRequest,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationResult:
        """Restyle a room or garden photo."""
        return await self.generate(request, on_progress, cancel_event)

    async def generate_inpainting(
        self,
        request: InpaintRequest,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationResult:
        """Replace the masked region of a photo."""
        return await self.generate(request, on_progress, cancel_event)

    async def generate_exterior(
        self,
        request: ExteriorRequest,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationResult:
        """Restyle a building exterior."""
        return await self.generate(request, on_progress, cancel_event)

    async def generate_repaint(
        self,
        request: RepaintRequest,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationResult:
        """Repaint walls (or another subject) in a new color."""
        return await self.generate(request, on_progress, cancel_event)

    async def generate_refloor(
        self,
        request: RefloorRequest,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationResult:
        """Replace the floor material."""
        return await self.generate(request, on_progress, cancel_event)

    async def generate_style_transfer(
        self,
        request: StyleTransferRequest,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationResult:
        """Apply the look of a reference photo."""
        return await self.generate(request, on_progress, cancel_event)

    async def generate_freeform(
        self,
        request: FreeformRequest,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationResult:
        """Apply a free-text edit instruction."""
        return await self.generate(request, on_progress, cancel_event)

    async def generate_batch(
        self,
        requests: List[GenerationRequest],
    ) -> List[GenerationResult]:
        """
        Run several independent requests concurrently.

        Args:
            requests: Generation requests of any kind

        Returns:
            Results in the same order as the requests
        """
        return list(await asyncio.gather(*(self.generate(r) for r in requests)))

    # Internals

    async def _timed_attempt(
        self,
        variant: TaskVariant,
        request: GenerationRequest,
        prompt: str,
        task_uuid: str,
    ) -> str:
        try:
            return await asyncio.wait_for(
                self._dispatch(variant, request, prompt, task_uuid),
                timeout=self.attempt_timeout,
            )
        except asyncio.TimeoutError as exc:
            raise GenerationTimeoutError() from exc

    async def _dispatch(
        self,
        variant: TaskVariant,
        request: GenerationRequest,
        prompt: str,
        task_uuid: str,
    ) -> str:
        """Send one task and return the generated image URL."""
        task = build_task(request, task_uuid, prompt)
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        logger.debug("Posting task %s to %s", task_uuid, self.base_url)

        try:
            async with httpx.AsyncClient(
                timeout=self.attempt_timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(self.base_url, json=[task], headers=headers)
        except httpx.TimeoutException as exc:
            raise GenerationTimeoutError() from exc
        except httpx.TransportError as exc:
            logger.warning("Network error for task %s: %s", task_uuid, exc)
            raise NetworkError() from exc

        logger.debug("Task %s response status: %d", task_uuid, response.status_code)

        if not response.is_success:
            message = extract_error_message(response.text, response.status_code)
            raise ServerError(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ResponseShapeError() from exc

        image_url = extract_image_url(payload)
        if not image_url:
            logger.error("No image URL in response for task %s: %s", task_uuid, payload)
            raise ResponseShapeError()
        return image_url

    async def _run_cancellable(
        self,
        awaitable: Awaitable,
        cancel_event: Optional[asyncio.Event],
    ):
        """Await ``awaitable``, aborting it as soon as ``cancel_event`` is set."""
        if cancel_event is None:
            return await awaitable

        work = asyncio.ensure_future(awaitable)
        if cancel_event.is_set():
            work.cancel()
            await asyncio.gather(work, return_exceptions=True)
            raise GenerationCancelledError()

        waiter = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({work, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()
            if not work.done():
                work.cancel()
                # Let the request unwind so its connection is released
                await asyncio.gather(work, return_exceptions=True)

        if work.cancelled():
            raise GenerationCancelledError()
        return work.result()

    def _failure(
        self,
        error: GenerationError,
        attempts: int,
        task_uuid: Optional[str],
        prompt: str,
        start_time: float,
    ) -> GenerationResult:
        return GenerationResult(
            success=False,
            error=error.message,
            error_kind=error.kind,
            attempts=attempts,
            task_uuid=task_uuid,
            prompt_used=prompt,
            elapsed_seconds=time.monotonic() - start_time,
        )
