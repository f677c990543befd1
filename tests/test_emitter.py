"""
Tests for callback dispatch and snapshot throttling.
"""
import unittest
from dataclasses import replace

from treegestures.core.emitter import EventDispatcher, GestureCallbacks, SnapshotPublisher
from treegestures.domain.enums import ActiveMode, GestureEvent
from treegestures.domain.models import EmittedEvent, GestureSnapshot


class TestEventDispatcher(unittest.TestCase):

    def test_events_fire_in_order(self):
        calls = []
        dispatcher = EventDispatcher(GestureCallbacks(
            on_select=lambda: calls.append("select"),
            on_delta_move=lambda dx, dy: calls.append(("delta", dx, dy)),
            on_scroll_move=lambda y: calls.append(("scroll", y)),
        ))
        dispatcher.dispatch([
            EmittedEvent(GestureEvent.SELECT),
            EmittedEvent(GestureEvent.DELTA_MOVE, (0.01, -0.02)),
            EmittedEvent(GestureEvent.SCROLL_MOVE, (0.3,)),
        ])
        self.assertEqual(calls, ["select", ("delta", 0.01, -0.02), ("scroll", 0.3)])

    def test_missing_callbacks_are_skipped(self):
        EventDispatcher().dispatch([
            EmittedEvent(GestureEvent.SELECT),
            EmittedEvent(GestureEvent.ZOOM, (0.5,)),
        ])

    def test_failure_is_logged_and_later_events_still_fire(self):
        calls = []

        def broken():
            raise RuntimeError("consumer bug")

        dispatcher = EventDispatcher(GestureCallbacks(
            on_select=broken,
            on_index_move=lambda x, y: calls.append((x, y)),
        ))
        with self.assertLogs("treegestures.core.emitter", level="ERROR") as logs:
            dispatcher.dispatch([
                EmittedEvent(GestureEvent.SELECT),
                EmittedEvent(GestureEvent.INDEX_MOVE, (0.4, 0.6)),
            ])
        self.assertEqual(calls, [(0.4, 0.6)])
        self.assertIn("SELECT", logs.output[0])


class TestSnapshotPublisher(unittest.TestCase):

    def setUp(self):
        self.received = []
        self.publisher = SnapshotPublisher(self.received.append, interval_ms=100.0)
        self.base = GestureSnapshot(index_position=(0.4, 0.4), scroll_y=0.4)

    def test_first_offer_publishes(self):
        self.assertTrue(self.publisher.offer(self.base, 0.0))
        self.assertEqual(self.received, [self.base])
        self.assertEqual(self.publisher.last_publish_time, 0.0)

    def test_small_change_within_interval_is_held_back(self):
        self.publisher.offer(self.base, 0.0)
        nudged = replace(self.base, index_position=(0.405, 0.4), scroll_y=0.41)
        self.assertFalse(self.publisher.offer(nudged, 50.0))
        self.assertIs(self.publisher.last_published, self.base)

    def test_interval_elapsed_republishes(self):
        self.publisher.offer(self.base, 0.0)
        self.assertFalse(self.publisher.offer(self.base, 99.0))
        self.assertTrue(self.publisher.offer(self.base, 100.0))
        self.assertEqual(len(self.received), 2)

    def test_boolean_change_publishes_immediately(self):
        self.publisher.offer(self.base, 0.0)
        pinching = replace(self.base, is_pinching=True, mode=ActiveMode.PINCH)
        self.assertTrue(self.publisher.offer(pinching, 5.0))

    def test_large_position_change_publishes_immediately(self):
        self.publisher.offer(self.base, 0.0)
        moved = replace(self.base, index_position=(0.45, 0.4))
        self.assertTrue(self.publisher.offer(moved, 5.0))

    def test_scroll_has_its_own_tolerance(self):
        self.publisher.offer(self.base, 0.0)
        self.assertFalse(self.publisher.offer(replace(self.base, scroll_y=0.415), 5.0))
        self.assertTrue(self.publisher.offer(replace(self.base, scroll_y=0.43), 10.0))

    def test_timestamps_and_deltas_do_not_count_as_change(self):
        self.publisher.offer(self.base, 0.0)
        other = replace(self.base, timestamp=42.0, delta_x=0.3, hand_spread=0.9)
        self.assertFalse(self.publisher.offer(other, 5.0))

    def test_reset_forgets_last(self):
        self.publisher.offer(self.base, 0.0)
        self.publisher.reset()
        self.assertIsNone(self.publisher.last_published)
        self.assertTrue(self.publisher.offer(self.base, 1.0))

    def test_without_consumer(self):
        publisher = SnapshotPublisher()
        self.assertTrue(publisher.offer(self.base, 0.0))
        self.assertFalse(publisher.offer(self.base, 1.0))


if __name__ == "__main__":
    unittest.main()
