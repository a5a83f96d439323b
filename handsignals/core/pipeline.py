"""
Per-frame evaluation engine for hand signals.

Runs the metric stages in dependency order over one hand snapshot:

    validate -> flexion -> pinch (fingers, then thumb) -> palm line
    -> base rotation -> fist / grasp -> ray direction

The engine keeps no per-hand state; everything it derives is written into
the HandMetrics table passed in, so separate hands can be evaluated on
separate threads as long as each has its own table.
"""

import time
import logging
from typing import Mapping, Optional

from handsignals.core.types import HandConfigurationError, HandMetrics, HandModel, ProxyBodyModel
from handsignals.modules.metrics.finger_metrics import (
    bone_rotation_lerp,
    finger_flexion,
    finger_pinch,
    palm_line_lerp,
    update_finger_lengths,
)
from handsignals.modules.metrics.hand_metrics import hand_fist, hand_grasp, hand_ray_direction
from handsignals.modules.skeleton.validation import validate_hand
from handsignals.modules.utils.config import Config, MetricsConfig
from handsignals.modules.utils.logger import SignalLogger, log_timing

logger = logging.getLogger(__name__)


class EvaluationResult:
    """Result of a single evaluation pass."""

    __slots__ = ("hand_id", "frame_id", "metrics", "latency_ms", "timestamp")

    def __init__(self, hand_id: str, frame_id: int, metrics: HandMetrics):
        self.hand_id = hand_id
        self.frame_id = frame_id
        self.metrics = metrics
        self.latency_ms = 0.0
        self.timestamp = time.time()

    def __repr__(self):
        return (
            f"EvaluationResult({self.hand_id}, frame={self.frame_id}, "
            f"fist={self.metrics.fist:.2f}, grasp={self.metrics.grasp:.2f})"
        )


class HandMetricsEngine:
    """Calibrates and evaluates pose signals for hand snapshots.

    Example:
        >>> engine = HandMetricsEngine(MetricsConfig())
        >>> metrics = engine.calibrate(hand, scale=0.18)
        >>> result = engine.tick(hand, scale=0.18, metrics=metrics)
        >>> result.metrics.fist
    """

    def __init__(
        self,
        config: Optional[MetricsConfig] = None,
        proxies: Optional[Mapping[str, ProxyBodyModel]] = None,
        signal_logger: Optional[SignalLogger] = None,
    ):
        self.config = config or MetricsConfig()
        self._proxies = proxies
        self._signal_logger = signal_logger
        self._frame_count = 0

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        proxies: Optional[Mapping[str, ProxyBodyModel]] = None,
        signal_logger: Optional[SignalLogger] = None,
    ) -> "HandMetricsEngine":
        """Build an engine from the YAML config, loading the bundled file if none is given."""
        if config is None:
            config = Config().load()
        engine = cls(config.metrics_config, proxies=proxies, signal_logger=signal_logger)
        logger.info("Engine configured: %s", engine.config)
        return engine

    def calibrate(self, hand: HandModel, scale: float, metrics: Optional[HandMetrics] = None) -> HandMetrics:
        """Validate the hand and store calibrated finger lengths."""
        metrics = metrics if metrics is not None else HandMetrics()
        return update_finger_lengths(hand, scale, metrics)

    @log_timing
    def evaluate(self, hand: HandModel, scale: float, metrics: HandMetrics) -> HandMetrics:
        """Update every signal of ``metrics`` from the current joint positions."""
        if not scale > 0.0:
            raise ValueError("scale must be positive, got %r" % scale)
        validate_hand(hand)
        cfg = self.config

        # --- 1. Flexion ---
        for finger in hand.fingers:
            m = metrics[finger.name]
            if not m.length > 0.0:
                raise HandConfigurationError(
                    "%s has no calibrated length; call calibrate() first" % finger.name.value
                )
            m.flexion_lerp = finger_flexion(finger, m.length, cfg.min_flex_rel_distance, scale)

        # --- 2. Pinch (thumb last: it reads the others) ---
        for finger in hand.non_thumb_fingers + (hand.thumb,):
            metrics[finger.name].pinch_lerp = finger_pinch(
                hand, finger,
                cfg.pinch_max_rel_distance, cfg.pinch_min_rel_distance,
                scale, metrics,
            )

        # --- 3. Palm line ---
        for finger in hand.fingers:
            metrics[finger.name].palm_line_lerp = palm_line_lerp(
                hand, finger,
                cfg.palm_line_max_rel_distance, cfg.palm_line_min_rel_distance,
                scale,
            )

        # --- 4. Base rotation ---
        for finger in hand.fingers:
            if cfg.base_rotation_bone >= len(finger.bones):
                raise HandConfigurationError(
                    "%s has %d bones, base rotation bone index is %d"
                    % (finger.name.value, len(finger.bones), cfg.base_rotation_bone)
                )
            metrics[finger.name].base_rotation_lerp = bone_rotation_lerp(
                finger.bones[cfg.base_rotation_bone],
                cfg.max_local_rot_z, cfg.min_local_rot_z,
            )

        # --- 5. Aggregates ---
        metrics.fist = hand_fist(hand, metrics, validate=False)
        metrics.grasp = hand_grasp(hand, metrics, validate=False)

        # --- 6. Ray ---
        if self._proxies is not None and hand.proxy_id is not None:
            metrics.ray_direction = hand_ray_direction(hand, self._proxies)

        return metrics

    def tick(self, hand: HandModel, scale: float, metrics: HandMetrics) -> EvaluationResult:
        """Evaluate one tracking frame and wrap it with timing metadata."""
        start = time.perf_counter()
        self._frame_count += 1
        self.evaluate(hand, scale, metrics)

        result = EvaluationResult(hand.hand_id, self._frame_count, metrics)
        result.latency_ms = (time.perf_counter() - start) * 1000.0

        if self._signal_logger is not None:
            self._signal_logger.log_frame(hand.hand_id, result.frame_id, metrics, result.latency_ms)
        return result

    @property
    def frame_count(self) -> int:
        return self._frame_count
