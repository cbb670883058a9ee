"""帧更新调度器

- 任意时刻最多只有一个待执行的帧；帧执行前到达的宿主事件合并到同一个待处理集合。
- 帧内通过 `handle(name)` 消费事件，每个事件恰好被处理一次；帧结束后丢弃未被消费的事件。
- 帧结束时若仍有输入处于按住状态（`keep_alive()` 为真），立即请求下一帧，
  以支持按住缩放键等持续动作；否则进入空闲，直到下一次宿主事件。
- `dispose()` 取消待执行的帧，此后调度器永久失效（重复调用安全）。
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Set

from engine.grid_editor.host import FrameClock


class UpdateScheduler:
    def __init__(
        self,
        frame_clock: FrameClock,
        frame_callback: Callable[[], None],
        keep_alive: Callable[[], bool],
    ) -> None:
        self._clock = frame_clock
        self._frame_callback = frame_callback
        self._keep_alive = keep_alive
        self._pending_token: Optional[Any] = None
        self._disposed = False
        self.pending_events: Set[str] = set()
        self.frames_executed = 0

    @property
    def is_frame_pending(self) -> bool:
        return self._pending_token is not None

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def request(self, event_name: str) -> None:
        if self._disposed:
            return
        self.pending_events.add(event_name)
        self._arm()

    def handle(self, event_name: str) -> bool:
        if event_name in self.pending_events:
            self.pending_events.discard(event_name)
            return True
        return False

    def _arm(self) -> None:
        if self._pending_token is None:
            self._pending_token = self._clock.request_frame(self._run_frame)

    def _run_frame(self) -> None:
        if self._disposed:
            return
        self._pending_token = None
        self.frames_executed += 1
        self._frame_callback()
        self.pending_events.clear()
        if not self._disposed and self._keep_alive():
            self._arm()

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        if self._pending_token is not None:
            self._clock.cancel_frame(self._pending_token)
            self._pending_token = None
        self.pending_events.clear()
