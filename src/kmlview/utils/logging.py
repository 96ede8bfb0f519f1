"""
Logging helpers for timing operations.
"""

import logging
import time
from typing import Any, Optional

logger = logging.getLogger(__name__)


class PerformanceTimer:
    """
    Context manager for timing code blocks.

    Usage:
        with PerformanceTimer("parse_kml") as timer:
            document = parser.parse(content)
        # Automatically logs execution time
    """

    def __init__(
        self,
        operation_name: str,
        log_level: int = logging.INFO,
        threshold_ms: Optional[float] = None,
    ):
        """
        Initialize PerformanceTimer.

        Args:
            operation_name: Name of the operation being timed
            log_level: Logging level to use
            threshold_ms: Only log if execution time exceeds this threshold
        """
        self.operation_name = operation_name
        self.log_level = log_level
        self.threshold_ms = threshold_ms
        self.start_time: Optional[float] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self) -> "PerformanceTimer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.start_time is None:
            return
        self.duration_ms = (time.perf_counter() - self.start_time) * 1000

        if self.threshold_ms is None or self.duration_ms >= self.threshold_ms:
            logger.log(
                self.log_level,
                f"{self.operation_name} completed in {self.duration_ms:.2f}ms",
                extra={
                    "duration_ms": self.duration_ms,
                    "operation": self.operation_name,
                },
            )
