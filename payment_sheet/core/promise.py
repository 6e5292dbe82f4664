"""Single-assignment promise with observer registration.

A ``Promise`` starts pending and settles exactly once, either with a value
or with an error. Observers always run on a later iteration of the event
loop, in the order they were registered, whether they were added before or
after settlement. Promises can also be awaited directly:

    promise = Promise()
    loop.call_later(1, promise.resolve, 42)
    value = await promise
"""

import asyncio
from typing import Callable, Generic, List, Optional, TypeVar

from ..types import PromiseAlreadySettledError


T = TypeVar("T")


class Result(Generic[T]):
    """Success-or-failure outcome of a settled promise."""

    __slots__ = ("_value", "_error", "_is_success")

    def __init__(self, value: Optional[T] = None, error: Optional[BaseException] = None, is_success: bool = True):
        self._value = value
        self._error = error
        self._is_success = is_success

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value, is_success=True)

    @classmethod
    def failure(cls, error: BaseException) -> "Result[T]":
        return cls(error=error, is_success=False)

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def value(self) -> Optional[T]:
        return self._value

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    def get(self) -> T:
        """Return the value, or raise the error of a failed result."""
        if not self._is_success:
            raise self._error
        return self._value

    def __repr__(self) -> str:
        if self._is_success:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self._error!r})"


class Promise(Generic[T]):
    """Asynchronous value that is settled at most once."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        """Initialize a pending promise.

        Args:
            loop: Event loop used to deliver outcomes to observers. Defaults
                to the running loop, so promises are normally created from
                inside a coroutine.
        """
        self._loop = loop or asyncio.get_running_loop()
        self._result: Optional[Result[T]] = None
        self._observers: List[Callable[[Result[T]], None]] = []

    @property
    def is_settled(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Optional[Result[T]]:
        return self._result

    def resolve(self, value: T) -> None:
        self._settle(Result.success(value))

    def reject(self, error: BaseException) -> None:
        self._settle(Result.failure(error))

    def observe(self, callback: Callable[[Result[T]], None]) -> None:
        """Register a callback for the eventual outcome.

        The callback runs exactly once. If the promise has already settled it
        is scheduled right away, otherwise it is queued until settlement.
        """
        if self._result is None:
            self._observers.append(callback)
        else:
            self._loop.call_soon(callback, self._result)

    def _settle(self, result: Result[T]) -> None:
        if self._result is not None:
            raise PromiseAlreadySettledError(
                f"Promise already settled with {self._result!r}; cannot settle again with {result!r}"
            )
        self._result = result
        observers, self._observers = self._observers, []
        for observer in observers:
            self._loop.call_soon(observer, result)

    def __await__(self):
        future = self._loop.create_future()

        def _forward(result: Result[T]) -> None:
            # The awaiting coroutine may have been cancelled meanwhile
            if future.done():
                return
            if result.is_success:
                future.set_result(result.value)
            else:
                future.set_exception(result.error)

        self.observe(_forward)
        return future.__await__()
