"""
main.py — Application entry point.

    FrameSource → TrackingSession (GestureManager) → callbacks
               → MemoryNavigator → OpenCVUI

Each component is independently testable and replaceable.
"""
from __future__ import annotations
import logging
from typing import Callable, List, Optional

from treegestures.app.args_parser import get_args
from treegestures.app.config import AppConfig, load_config
from treegestures.app.navigator import MemoryNavigator
from treegestures.core.frame_source import FrameSource, ReplayFrameSource
from treegestures.core.recorder import LandmarkRecorder
from treegestures.core.session import TrackingSession
from treegestures.core.validation import validate_sample
from treegestures.domain.enums import ActiveMode
from treegestures.domain.errors import ConfigError
from treegestures.domain.models import FrameResult, SourceFrame

logger = logging.getLogger(__name__)


def make_source_factory(config: AppConfig, replay: Optional[str] = None) -> Callable[[], FrameSource]:
    if replay:
        return lambda: ReplayFrameSource(replay, realtime=config.show_ui)

    def camera_source() -> FrameSource:
        # cv2 / mediapipe are only loaded when a live camera is used
        from treegestures.core.camera_source import CameraFrameSource

        return CameraFrameSource(
            device=config.camera_device,
            fps_limit=config.fps_limit,
            width=config.frame_width,
            height=config.frame_height,
            model_complexity=config.model_complexity,
            min_detection_confidence=config.min_detection_confidence,
            min_tracking_confidence=config.min_tracking_confidence,
        )

    return camera_source


def run(
    config: AppConfig,
    replay: Optional[str] = None,
    record: Optional[str] = None,
    max_frames: Optional[int] = None,
) -> int:
    """Runs the pipeline until it ends; returns a process exit code."""
    navigator = MemoryNavigator(config.memory_count)
    session = TrackingSession(
        config.gestures,
        navigator.callbacks(),
        make_source_factory(config, replay),
        on_snapshot=navigator.on_snapshot,
    )
    recorder = LandmarkRecorder() if record else None

    if not session.enable():
        logger.error("Could not start tracking: %s", session.error)
        return 1

    ui = None
    if config.show_ui:
        from treegestures.app.ui import OpenCVUI
        ui = OpenCVUI(config.window_name)

    prev_mode: Optional[ActiveMode] = None

    def on_frame(frame: SourceFrame, result: FrameResult) -> bool:
        nonlocal prev_mode
        if recorder is not None:
            recorder.add_frame(frame.sample, frame.timestamp)

        mode = result.snapshot.mode
        if mode is not prev_mode:
            logger.info("[MODE] %s → %s", prev_mode.value if prev_mode else None, mode.value)
            prev_mode = mode

        navigator.ease()
        if ui is not None and frame.image is not None:
            ui.render(frame.image, validate_sample(frame.sample), result.snapshot, navigator)
            return ui.should_quit()
        return False

    try:
        processed = session.run(max_frames=max_frames, on_frame=on_frame)
        logger.info("Processed %d frames", processed)
    finally:
        session.disable()
        navigator.clear()
        if recorder is not None:
            recorder.save(record)
        if ui is not None:
            ui.close()
        logger.info("Application closed cleanly")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = get_args(argv)
    try:
        config = load_config(args.config).with_overrides(
            memory_count=args.memories,
            show_ui=False if args.no_ui else None,
            log_level="DEBUG" if args.debug else None,
        )
    except ConfigError as exc:
        logging.basicConfig(level=logging.ERROR)
        logger.error("%s", exc)
        return 2

    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(config, replay=args.replay, record=args.record, max_frames=args.max_frames)


if __name__ == "__main__":
    raise SystemExit(main())
