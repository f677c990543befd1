"""
Tests for pointer smoothing, delta tracking and stability counters.
"""
import unittest

from treegestures.core.cooldown_manager import CooldownManager
from treegestures.core.smoothing import DeltaTracker, PointerSmoother
from treegestures.core.stability import StabilityCounter


class TestPointerSmoother(unittest.TestCase):

    def test_starts_at_centre_and_moves_by_factor(self):
        smoother = PointerSmoother(0.3)
        self.assertEqual(smoother.position, (0.5, 0.5))
        x, y = smoother.update(1.0, 0.0)
        self.assertAlmostEqual(x, 0.65)
        self.assertAlmostEqual(y, 0.35)

    def test_converges_to_steady_input(self):
        smoother = PointerSmoother(0.3)
        for _ in range(60):
            smoother.update(0.2, 0.9)
        self.assertAlmostEqual(smoother.position[0], 0.2, places=6)
        self.assertAlmostEqual(smoother.position[1], 0.9, places=6)

    def test_reset(self):
        smoother = PointerSmoother(0.3)
        smoother.update(0.0, 0.0)
        smoother.reset()
        self.assertEqual(smoother.position, (0.5, 0.5))


class TestDeltaTracker(unittest.TestCase):

    def setUp(self):
        self.tracker = DeltaTracker(0.002)

    def test_first_frame_has_no_delta(self):
        self.assertEqual(self.tracker.update(0.4, 0.4), (0.0, 0.0))
        self.assertTrue(self.tracker.visible)

    def test_micro_movement_is_dead_zoned(self):
        self.tracker.update(0.4, 0.4)
        self.assertEqual(self.tracker.update(0.401, 0.401), (0.0, 0.0))

    def test_movement_above_dead_zone_is_raw_difference(self):
        self.tracker.update(0.4, 0.4)
        dx, dy = self.tracker.update(0.403, 0.397)
        self.assertAlmostEqual(dx, 0.003)
        self.assertAlmostEqual(dy, -0.003)

    def test_axes_are_dead_zoned_independently(self):
        self.tracker.update(0.4, 0.4)
        dx, dy = self.tracker.update(0.41, 0.401)
        self.assertAlmostEqual(dx, 0.01)
        self.assertEqual(dy, 0.0)

    def test_hand_loss_prevents_jump(self):
        self.tracker.update(0.1, 0.1)
        self.tracker.hand_lost()
        self.assertIsNone(self.tracker.last_position)
        self.assertFalse(self.tracker.visible)
        self.assertEqual(self.tracker.update(0.9, 0.9), (0.0, 0.0))


class TestStabilityCounter(unittest.TestCase):

    def test_stable_after_required_frames(self):
        counter = StabilityCounter(3)
        self.assertEqual([counter.update(True) for _ in range(4)], [False, False, True, True])

    def test_failure_resets_to_zero(self):
        counter = StabilityCounter(3)
        counter.update(True)
        counter.update(True)
        counter.update(False)
        self.assertEqual(counter.count, 0)
        self.assertFalse(counter.update(True))


class TestCooldownManager(unittest.TestCase):

    def test_first_event_always_allowed(self):
        cm = CooldownManager(500)
        self.assertTrue(cm.ok("SELECT", 0.0))
        self.assertEqual(cm.last("SELECT"), 0.0)

    def test_cooldown_is_inclusive(self):
        cm = CooldownManager(500)
        cm.ok("SELECT", 1000.0)
        self.assertFalse(cm.ok("SELECT", 1499.0))
        self.assertTrue(cm.ok("SELECT", 1500.0))

    def test_rejected_call_does_not_record(self):
        cm = CooldownManager(500)
        cm.ok("SELECT", 0.0)
        cm.ok("SELECT", 100.0)
        self.assertEqual(cm.last("SELECT"), 0.0)

    def test_reset_all(self):
        cm = CooldownManager(500)
        cm.ok("SELECT", 0.0)
        cm.reset_all()
        self.assertTrue(cm.ready("SELECT", 1.0))


if __name__ == "__main__":
    unittest.main()
