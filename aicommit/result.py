"""Stage results for the collect -> generate -> confirm -> commit pipeline."""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from aicommit.errors import AICommitError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """Outcome of one pipeline stage: a value or the error that stopped it."""
    value: Optional[T] = None
    error: Optional[AICommitError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T = None) -> 'StageResult[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: AICommitError) -> 'StageResult[T]':
        return cls(error=error)

    def then(self, stage: Callable[[T], 'StageResult[U]']) -> 'StageResult[U]':
        """Run the next stage on our value, or pass the failure through untouched."""
        if not self.ok:
            return StageResult(error=self.error)
        return stage(self.value)


def capture(func: Callable[..., T], *args) -> StageResult[T]:
    """Call func and turn a pipeline error into a failed result."""
    try:
        return StageResult.success(func(*args))
    except AICommitError as e:
        return StageResult.failure(e)
