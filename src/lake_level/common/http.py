from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

import requests

from ..errors import TransportError
from .telemetry import TelemetryEvent, TelemetryService, log_event

DEFAULT_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/129.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;"
        "q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8"
    ),
    "Accept-Language": "fr-CH,fr;q=0.9,en;q=0.8",
    "Connection": "close",
}


@dataclass(frozen=True)
class ThrottlePolicy:
    min_delay: float = 1.0
    step: float = 0.2
    max_delay: float = 2.0


class ThrottledClient:
    """Single-attempt GET client with request spacing, a timeout and telemetry.

    Each instance keeps its own request counter; the first request is sent
    immediately and later ones wait ``min_delay + step * (n - 1)`` seconds,
    capped at ``max_delay``. Failures are raised as ``TransportError``.
    """

    def __init__(
        self,
        default_headers: Optional[Dict[str, str]] = None,
        throttle_policy: Optional[ThrottlePolicy] = None,
        telemetry: Optional[TelemetryService] = None,
        *,
        request_timeout: float = 30,
        request_func: Optional[Callable[[str, Dict[str, str], float], requests.Response]] = None,
        sleep_func: Optional[Callable[[float], None]] = None,
    ) -> None:
        self._headers = {**DEFAULT_HEADERS, **(default_headers or {})}
        self._policy = throttle_policy or ThrottlePolicy()
        self._telemetry = telemetry or TelemetryService()
        self._timeout = request_timeout
        self._request = request_func or self._default_request
        self._sleep = sleep_func or time.sleep
        self._request_counter = 0
        self._lock = threading.Lock()

    @property
    def timeout(self) -> float:
        return self._timeout

    def _default_request(self, url: str, headers: Dict[str, str], timeout: float) -> requests.Response:
        return requests.get(url, headers=headers, timeout=timeout)

    def _reserve_delay(self) -> float:
        with self._lock:
            index = self._request_counter
            self._request_counter += 1
        if index == 0:
            return 0.0
        delay = self._policy.min_delay + self._policy.step * (index - 1)
        return min(delay, self._policy.max_delay)

    def _emit(self, kind: str, **payload: object) -> None:
        event = TelemetryEvent(kind=kind, payload=payload)
        self._telemetry.emit(event)

    def send(self, url: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        delay = self._reserve_delay()
        if delay:
            self._sleep(delay)

        merged_headers = {**self._headers, **(headers or {})}
        self._emit("http.start", url=url)
        try:
            response = self._request(url, merged_headers, self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            self._emit("http.failure", url=url, error=str(exc))
            raise TransportError(f"failed to fetch {url}: {exc}", context={"url": url}) from exc

        self._emit("http.success", url=url, status=response.status_code)
        return response


def build_client(config: Mapping[str, Any] | None = None, **overrides: Any) -> ThrottledClient:
    """Build a ThrottledClient from the ``http`` section of config.yml."""
    http_config = dict((config or {}).get("http", {}) or {})
    policy = ThrottlePolicy(
        min_delay=float(http_config.get("min_delay", ThrottlePolicy.min_delay)),
        step=float(http_config.get("delay_step", ThrottlePolicy.step)),
        max_delay=float(http_config.get("max_delay", ThrottlePolicy.max_delay)),
    )
    telemetry = TelemetryService()
    telemetry.add_sink(log_event)
    return ThrottledClient(
        default_headers=http_config.get("headers") or None,
        throttle_policy=policy,
        telemetry=telemetry,
        request_timeout=float(http_config.get("timeout", 30)),
        **overrides,
    )
