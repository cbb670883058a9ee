from __future__ import annotations

from PyQt6 import QtCore
from typing import Callable, Optional

# 约 60fps
FRAME_INTERVAL_MS = 16


class QtFrameClock(QtCore.QObject):
    """
    基于单次 QTimer 的帧回调调度器。
    - request_frame() 返回定时器本身作为取消令牌
    - cancel_frame() 停止定时器并释放
    """

    def __init__(self, parent: Optional[QtCore.QObject] = None, interval_ms: int = FRAME_INTERVAL_MS) -> None:
        super().__init__(parent)
        self._interval_ms = interval_ms

    def request_frame(self, callback: Callable[[], None]) -> QtCore.QTimer:
        timer = QtCore.QTimer(self)
        timer.setSingleShot(True)

        def _fire() -> None:
            timer.deleteLater()
            callback()

        timer.timeout.connect(_fire)
        timer.start(self._interval_ms)
        return timer

    def cancel_frame(self, token: QtCore.QTimer) -> None:
        token.stop()
        token.deleteLater()
