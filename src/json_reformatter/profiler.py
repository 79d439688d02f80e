"""Performance profiler for reformat runs."""

import time
import psutil
import logging
from typing import Optional, List
from dataclasses import dataclass


@dataclass
class PerformanceMetrics:
    """Performance metrics for a single operation."""
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


class PerformanceProfiler:
    """
    Records wall time and process memory for each reformat run.

    Metrics are kept in ``metrics_history`` and logged at DEBUG level.
    Sampling problems are logged and never interrupt the operation being
    measured.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: float = 0
        self.peak_memory: float = 0

    def _memory_mb(self) -> Optional[float]:
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Memory sampling failed: {e}")
            return None

    def start_profiling(self, operation_name: str):
        """
        Start profiling an operation.

        Args:
            operation_name: Name of the operation
        """
        self.current_operation = operation_name
        self.start_time = time.time()
        self.start_memory = self._memory_mb() or 0
        self.peak_memory = self.start_memory

        self.logger.debug(f"Started profiling: {operation_name}")

    def sample_performance(self):
        """Sample current memory usage."""
        if not self.current_operation:
            return

        current_memory = self._memory_mb()
        if current_memory is not None:
            self.peak_memory = max(self.peak_memory, current_memory)

    def stop_profiling(self, input_size: int = 0, output_size: int = 0) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Args:
            input_size: Size of input data in bytes
            output_size: Size of output data in bytes

        Returns:
            PerformanceMetrics object with collected data
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        end_time = time.time()
        duration = end_time - self.start_time
        end_memory = self._memory_mb()
        if end_memory is None:
            end_memory = self.start_memory

        throughput = (input_size / 1024 / 1024) / duration if duration > 0 else 0  # MB/s

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            start_time=self.start_time,
            end_time=end_time,
            duration=duration,
            input_size=input_size,
            output_size=output_size,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            memory_peak_mb=max(self.peak_memory, end_memory),
            throughput_mbps=throughput
        )

        self.metrics_history.append(metrics)
        self._log_metrics(metrics)
        self.cancel_profiling()
        return metrics

    def cancel_profiling(self):
        """Discard the active session without recording metrics."""
        self.current_operation = None
        self.start_time = None

    def _log_metrics(self, metrics: PerformanceMetrics):
        self.logger.debug(
            f"{metrics.operation_name}: {metrics.duration * 1000:.1f}ms, "
            f"{metrics.input_size}B -> {metrics.output_size}B, "
            f"peak memory {metrics.memory_peak_mb:.1f}MB"
        )
