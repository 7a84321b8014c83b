"""결과 채널./Result channel with a completion signal."""

from __future__ import annotations

import threading
from queue import Empty, Queue
from typing import Union

_END = object()


class ResultChannel:
    """생산자 여럿, 소비자 하나의 바이트 수 채널./Many-producer single-consumer byte-count channel.

    생산자는 결코 막히지 않습니다. 수신 측이 닫힌 뒤의 전송은 버려집니다.
    Producers never block; sends after the receiver closed are dropped.
    """

    def __init__(self) -> None:
        self._queue: Queue[Union[int, object]] = Queue()
        self._closed = threading.Event()
        self._finished = False

    @property
    def closed(self) -> bool:
        """수신 측 종료 여부./Whether the receiver has closed."""

        return self._closed.is_set()

    def send(self, value: int) -> bool:
        """값을 보냅니다. 전달 여부를 반환./Send a value, returning whether it was queued."""

        if self._closed.is_set():
            return False
        self._queue.put(value)
        return True

    def finish(self) -> None:
        """더 이상 값이 없음을 알립니다./Signal that no more values follow."""

        self._queue.put(_END)

    def receive(self) -> int | None:
        """다음 값을 기다립니다. 종료 시 ``None``./Block for the next value; ``None`` at end."""

        if self._finished:
            return None
        item = self._queue.get()
        if item is _END:
            self._finished = True
            return None
        return int(item)  # type: ignore[call-overload]

    def close(self) -> None:
        """수신을 중단하고 대기 값을 버립니다./Stop receiving and discard pending values."""

        self._closed.set()
        while True:
            try:
                item = self._queue.get_nowait()
            except Empty:
                break
            if item is _END:
                self._finished = True
                break


__all__ = ["ResultChannel"]
