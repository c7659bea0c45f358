"""Performance profiler for conversion calls."""

import json
import logging
import threading
import time
from collections import deque
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Any, Deque, Dict, Iterator, Optional

import psutil

from .constants import DEFAULT_PROFILE_HISTORY


@dataclass
class PerformanceMetrics:
    """Performance metrics for one conversion."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float
    memory_peak_mb: float
    throughput_mbps: float
    entries_processed: int
    size_ratio: float


class ProfilingSession:
    """Measurements for a single in-flight operation."""

    def __init__(self, operation_name: str, input_size: int = 0):
        self.operation_name = operation_name
        self.input_size = input_size
        self.output_size = 0
        self.entries_processed = 0
        self.start_time = time.time()
        self.start_memory = _rss_mb()
        self.peak_memory = self.start_memory

    def sample(self) -> None:
        """Sample current memory usage."""
        self.peak_memory = max(self.peak_memory, _rss_mb(default=self.peak_memory))

    def record_output(self, output_size: int, entries_processed: int = 0) -> None:
        self.output_size = output_size
        self.entries_processed = entries_processed
        self.sample()


class PerformanceProfiler:
    """
    Collects duration, memory and throughput for conversion calls.

    Each profiled operation gets its own session, so one profiler can be
    shared by concurrent calls; finished metrics are appended to a
    bounded history under a lock, oldest entries dropping out first.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 max_history: int = DEFAULT_PROFILE_HISTORY):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
            max_history: Number of recent metrics to keep
        """
        if max_history < 1:
            raise ValueError("max_history must be at least 1")
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: Deque[PerformanceMetrics] = deque(maxlen=max_history)
        self._lock = threading.Lock()

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0) -> Iterator[ProfilingSession]:
        """
        Context manager for profiling operations.

        Metrics are recorded only when the block completes without error.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        session = self.start_profiling(operation_name, input_size)
        yield session
        self.stop_profiling(session)

    def start_profiling(self, operation_name: str, input_size: int = 0) -> ProfilingSession:
        self.logger.debug(f"Started profiling: {operation_name}")
        return ProfilingSession(operation_name, input_size)

    def stop_profiling(self, session: ProfilingSession) -> PerformanceMetrics:
        """
        Finish a session and return its metrics.

        Args:
            session: Session returned by start_profiling

        Returns:
            PerformanceMetrics object with collected data
        """
        end_time = time.time()
        duration = end_time - session.start_time
        session.sample()
        end_memory = _rss_mb(default=session.peak_memory)

        throughput = (session.input_size / 1024 / 1024) / duration if duration > 0 else 0  # MB/s
        size_ratio = session.output_size / session.input_size if session.input_size > 0 else 1.0

        metrics = PerformanceMetrics(
            operation_name=session.operation_name,
            start_time=session.start_time,
            end_time=end_time,
            duration=duration,
            input_size=session.input_size,
            output_size=session.output_size,
            memory_start_mb=session.start_memory,
            memory_end_mb=end_memory,
            memory_peak_mb=session.peak_memory,
            throughput_mbps=throughput,
            entries_processed=session.entries_processed,
            size_ratio=size_ratio
        )

        with self._lock:
            self.metrics_history.append(metrics)

        self.logger.info(
            f"Performance Summary - {session.operation_name}: "
            f"{duration * 1000:.1f}ms, {session.entries_processed} entries, "
            f"{throughput:.2f} MB/s, peak memory {session.peak_memory:.1f} MB"
        )
        return metrics

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all performance metrics.

        Returns:
            Dictionary with performance summary
        """
        with self._lock:
            history = list(self.metrics_history)

        if not history:
            return {"total_operations": 0}

        total_duration = sum(m.duration for m in history)
        total_input = sum(m.input_size for m in history)
        total_output = sum(m.output_size for m in history)

        return {
            "total_operations": len(history),
            "total_duration": total_duration,
            "total_input_mb": total_input / 1024 / 1024,
            "total_output_mb": total_output / 1024 / 1024,
            "total_entries": sum(m.entries_processed for m in history),
            "average_throughput_mbps": sum(m.throughput_mbps for m in history) / len(history),
            "average_memory_peak_mb": sum(m.memory_peak_mb for m in history) / len(history),
        }

    def export_metrics(self, format: str = "json") -> str:
        """
        Export performance metrics in specified format.

        Args:
            format: Export format ("json", "summary")

        Returns:
            Formatted metrics string
        """
        if format == "json":
            with self._lock:
                return json.dumps([asdict(m) for m in self.metrics_history], indent=2)

        elif format == "summary":
            summary = self.get_performance_summary()
            if not summary["total_operations"]:
                return "Performance Summary:\n  Total Operations: 0"
            lines = [
                "Performance Summary:",
                f"  Total Operations: {summary['total_operations']}",
                f"  Total Duration: {summary['total_duration']:.2f}s",
                f"  Total Entries: {summary['total_entries']}",
                f"  Average Throughput: {summary['average_throughput_mbps']:.2f} MB/s",
                f"  Average Memory Peak: {summary['average_memory_peak_mb']:.1f} MB",
            ]
            return "\n".join(lines)

        else:
            raise ValueError(f"Unsupported export format: {format}")


def _rss_mb(default: float = 0.0) -> float:
    try:
        return psutil.Process().memory_info().rss / 1024 / 1024
    except psutil.Error:
        return default
