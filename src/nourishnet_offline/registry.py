"""Operation executor registry."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from nourishnet_offline.protocols import OperationExecutor


class OperationRegistry:
    """Maps operation type tags to the executors that replay them."""

    def __init__(self) -> None:
        self._executors: dict[str, OperationExecutor] = {}

    def register(
        self, operation_type: str, executor: OperationExecutor
    ) -> None:
        self._executors[str(operation_type)] = executor

    def executor(
        self, operation_type: str
    ) -> Callable[[OperationExecutor], OperationExecutor]:
        """Decorator form of :meth:`register`."""

        def decorator(fn: OperationExecutor) -> OperationExecutor:
            self.register(operation_type, fn)
            return fn

        return decorator

    def unregister(self, operation_type: str) -> None:
        self._executors.pop(str(operation_type), None)

    def get(self, operation_type: str) -> OperationExecutor | None:
        return self._executors.get(str(operation_type))

    def types(self) -> list[str]:
        return list(self._executors)

    def __contains__(self, operation_type: object) -> bool:
        return str(operation_type) in self._executors

    def __iter__(self) -> Iterator[str]:
        return iter(self._executors)

    def __len__(self) -> int:
        return len(self._executors)
