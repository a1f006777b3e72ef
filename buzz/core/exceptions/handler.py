"""错误处理和日志记录模块."""

from __future__ import annotations

import threading
import traceback
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any, TypeVar

from loguru import logger

from .base import Buzz
from .codes import Bee
from .messages import as_buzz, format_error_response

T = TypeVar("T")


class ErrorHandler:
    """统一的错误处理器."""

    def __init__(self, log_level: str = "ERROR"):
        self.log_level = log_level

    def log_error(
        self,
        error: BaseException,
        context: dict[str, Any] | None = None,
        level: str | None = None,
    ) -> None:
        """记录错误日志.

        Args:
            error: 异常对象
            context: 上下文信息
            level: 日志级别, 默认使用处理器的级别
        """
        error_context = {
            "error_type": type(error).__name__,
            "timestamp": datetime.now(UTC).isoformat(),
            "stack_trace": "".join(traceback.format_exception(error)),
            **(context or {}),
        }

        bound = logger.bind(context=error_context)
        if isinstance(error, Buzz):
            bound = bound.bind(error_code=Buzz.hex_code(error.code), bee=error.bee)
            message = error.detail if error.detail is not None else "null"
        else:
            message = str(error)

        bound.opt(depth=1).log(level or self.log_level, "{error_message}", error_message=message)

    def create_error_response(self, error: BaseException, **kwargs: Any) -> dict[str, Any]:
        """创建标准化的错误响应."""
        return format_error_response(error, **kwargs)

    def handle_exception(self, error: BaseException, operation: str | None = None, /, **context: Any) -> Buzz:
        """处理异常并返回Buzz.

        Buzz原样返回; 其他异常被包装为Buzz, 原始异常作为cause保留.

        Args:
            error: 原始异常
            operation: 操作名称
            **context: 上下文信息, 同时作为消息模板变量

        Returns:
            Buzz
        """
        error_context = {**context, "operation": operation}
        self.log_error(error, error_context)
        if isinstance(error, Buzz):
            return error
        return as_buzz(error, self._classify(error), template_vars=error_context)

    @staticmethod
    def _classify(error: BaseException) -> Bee:
        error_type = type(error).__name__
        if isinstance(error, TimeoutError) or "Timeout" in error_type:
            return Bee.TIMEOUT
        if isinstance(error, ConnectionError):
            return Bee.CONNECTION_ERROR
        if isinstance(error, (ValueError, TypeError)):
            return Bee.INVALID_ARGUMENT
        if isinstance(error, (FileNotFoundError, LookupError)):
            return Bee.NOT_FOUND
        if isinstance(error, PermissionError):
            return Bee.FORBIDDEN
        return Bee.INTERNAL_ERROR


class ErrorTracker:
    """错误追踪和统计.

    最多保留 ``max_keys`` 个统计键, 超出时淘汰最早出现的键; ``total_errors`` 仍计入所有记录.
    """

    def __init__(self, max_keys: int = 1000) -> None:
        self.max_keys = max_keys
        self._lock = threading.Lock()
        self._total = 0
        self.error_counts: dict[str, int] = {}
        self.last_errors: dict[str, dict[str, Any]] = {}

    def record_error(
        self,
        error: Buzz | int,
        bee: str | None = None,
        operation: str | None = None,
    ) -> None:
        """记录错误统计."""
        if isinstance(error, Buzz):
            code, bee = error.code, error.bee
        else:
            code = error
        hex_code = Buzz.hex_code(code)
        key = f"{hex_code}:{bee}:{operation}"

        with self._lock:
            if key not in self.error_counts and len(self.error_counts) >= self.max_keys:
                oldest = next(iter(self.error_counts))
                del self.error_counts[oldest]
                self.last_errors.pop(oldest, None)
            self._total += 1
            self.error_counts[key] = self.error_counts.get(key, 0) + 1
            self.last_errors[key] = {
                "error_code": hex_code,
                "bee": bee,
                "operation": operation,
                "timestamp": datetime.now(UTC).isoformat(),
                "count": self.error_counts[key],
            }

    def get_error_stats(self) -> dict[str, Any]:
        """获取错误统计信息."""
        with self._lock:
            return {
                "error_counts": dict(self.error_counts),
                "last_errors": dict(self.last_errors),
                "total_errors": self._total,
            }

    def reset(self) -> None:
        """清空统计."""
        with self._lock:
            self._total = 0
            self.error_counts.clear()
            self.last_errors.clear()


class ErrorContextManager:
    """错误上下文管理器.

    操作名称和上下文保存在ContextVar中, 每个线程和任务各自独立.
    """

    def __init__(self, error_handler: ErrorHandler, tracker: ErrorTracker | None = None):
        self.error_handler = error_handler
        self.tracker = tracker
        self._scope: ContextVar[tuple[str | None, dict[str, Any]]] = ContextVar(
            f"buzz_error_scope_{id(self)}", default=(None, {})
        )

    @property
    def operation(self) -> str | None:
        return self._scope.get()[0]

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._scope.get()[1])

    def set_context(self, operation: str | None, /, **context: Any) -> None:
        """设置当前上下文的操作名称."""
        self._scope.set((operation, context))

    def _wrap(self, error: Exception, operation: str | None, context: dict[str, Any]) -> Buzz:
        buzz = self.error_handler.handle_exception(error, operation, **context)
        if self.tracker is not None:
            self.tracker.record_error(buzz, operation=operation)
        return buzz

    @contextmanager
    def error_context(self, operation: str, /, **context: Any) -> Iterator[None]:
        """代码块内的异常以Buzz重新抛出."""
        token = self._scope.set((operation, context))
        try:
            yield
        except Exception as e:
            buzz = self._wrap(e, operation, context)
            if buzz is e:
                raise
            raise buzz from e
        finally:
            self._scope.reset(token)

    def safe_execute(self, func: Callable[..., T], /, *args: Any, **kwargs: Any) -> T:
        """安全执行函数."""
        try:
            return func(*args, **kwargs)
        except Exception as e:
            operation, context = self._scope.get()
            buzz = self._wrap(e, operation, context)
            if buzz is e:
                raise
            raise buzz from e


# 全局错误处理器实例
error_handler = ErrorHandler()
error_tracker = ErrorTracker()
error_context = ErrorContextManager(error_handler, error_tracker)


def get_error_handler() -> ErrorHandler:
    """获取全局错误处理器."""
    return error_handler


def get_error_tracker() -> ErrorTracker:
    """获取错误追踪器."""
    return error_tracker


def get_error_context() -> ErrorContextManager:
    """获取错误上下文管理器."""
    return error_context
