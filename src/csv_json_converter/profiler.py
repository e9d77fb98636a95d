"""Performance profiler for conversion operations."""

import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class ConversionMetrics:
    """Performance metrics for a single conversion."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    rows_written: int
    memory_start_mb: float
    memory_end_mb: float
    throughput_mbps: float


class ConversionProfiler:
    """
    Profiler recording duration, sizes and memory of conversions.

    Metrics are logged at debug level and kept in ``metrics_history``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the conversion profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[ConversionMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: float = 0.0
        self.input_size = 0
        self.output_size = 0
        self.rows_written = 0

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling a conversion.

        Callers report output through ``record_output`` before the block
        ends. Metrics are recorded even when the block raises.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        self.start_profiling(operation_name, input_size)
        try:
            yield self
        finally:
            self.stop_profiling()

    def start_profiling(self, operation_name: str, input_size: int = 0) -> None:
        """Start profiling an operation."""
        self.current_operation = operation_name
        self.start_time = time.time()
        self.input_size = input_size
        self.output_size = 0
        self.rows_written = 0
        self.start_memory = self._memory_mb()

        self.logger.debug(f"Started profiling: {operation_name}")

    def record_output(self, output_size: int, rows_written: int) -> None:
        """Record the output produced by the current operation."""
        self.output_size = output_size
        self.rows_written = rows_written

    def stop_profiling(self) -> ConversionMetrics:
        """
        Stop profiling and return metrics.

        Returns:
            ConversionMetrics for the finished operation

        Raises:
            ValueError: If no operation is being profiled
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        end_time = time.time()
        duration = end_time - self.start_time
        throughput = (self.input_size / 1024 / 1024) / duration if duration > 0 else 0  # MB/s

        metrics = ConversionMetrics(
            operation_name=self.current_operation,
            start_time=self.start_time,
            end_time=end_time,
            duration=duration,
            input_size=self.input_size,
            output_size=self.output_size,
            rows_written=self.rows_written,
            memory_start_mb=self.start_memory,
            memory_end_mb=self._memory_mb(),
            throughput_mbps=throughput
        )
        self.metrics_history.append(metrics)

        self.logger.debug(f"Performance Summary - {metrics.operation_name}:")
        self.logger.debug(f"  Duration: {duration:.3f}s")
        self.logger.debug(f"  Throughput: {throughput:.2f} MB/s")
        self.logger.debug(f"  Rows Written: {metrics.rows_written}")
        self.logger.debug(f"  Memory: {metrics.memory_start_mb:.1f} MB -> {metrics.memory_end_mb:.1f} MB")

        self.current_operation = None
        self.start_time = None

        return metrics

    def get_summary(self) -> Dict[str, Any]:
        """
        Get summary of all recorded conversions.

        Returns:
            Dictionary with totals across the metrics history
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        return {
            "total_operations": len(self.metrics_history),
            "total_duration": sum(m.duration for m in self.metrics_history),
            "total_input_bytes": sum(m.input_size for m in self.metrics_history),
            "total_output_bytes": sum(m.output_size for m in self.metrics_history),
            "total_rows_written": sum(m.rows_written for m in self.metrics_history),
            "operations": [m.operation_name for m in self.metrics_history]
        }

    def _memory_mb(self) -> float:
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Memory sampling failed: {e}")
            return 0.0
