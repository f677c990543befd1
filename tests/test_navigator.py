"""
Tests for MemoryNavigator camera orbit, zoom and memory highlighting.
"""
import math
import unittest

from treegestures.app.navigator import (
    ORBIT_Y_MAX,
    ORBIT_Y_MIN,
    ROTATION_SENSITIVITY,
    ZOOM_MAX,
    ZOOM_MIN,
    CameraPose,
    MemoryNavigator,
)
from treegestures.core.gesture_manager import GestureManager
from treegestures.domain.models import GestureSnapshot
from tests.helpers import open_palm, pinch, point


class TestOrbit(unittest.TestCase):

    def setUp(self):
        self.nav = MemoryNavigator(10)

    def test_initial_pose(self):
        pose = self.nav.target
        self.assertEqual((pose.orbit_x, pose.orbit_y, pose.zoom), (0.0, 0.3, 8.0))

    def test_hand_right_orbits_left(self):
        self.nav.on_delta_move(0.01, 0.0)
        self.assertAlmostEqual(self.nav.target.orbit_x, -0.01 * ROTATION_SENSITIVITY)

    def test_rotation_multiplier_from_snapshot(self):
        self.nav.on_snapshot(GestureSnapshot(rotation_multiplier=2.0))
        self.nav.on_delta_move(0.01, 0.0)
        self.assertAlmostEqual(self.nav.target.orbit_x, -0.02 * ROTATION_SENSITIVITY)

    def test_vertical_multiplier_is_capped(self):
        self.nav.on_snapshot(GestureSnapshot(rotation_multiplier=2.0))
        self.nav.on_delta_move(0.0, 0.05)
        self.assertAlmostEqual(self.nav.target.orbit_y, 0.3 - 0.05 * 1.2 * 1.5)

    def test_tilt_is_clamped(self):
        for _ in range(50):
            self.nav.on_delta_move(0.0, 0.1)
        self.assertEqual(self.nav.target.orbit_y, ORBIT_Y_MIN)
        for _ in range(50):
            self.nav.on_delta_move(0.0, -0.1)
        self.assertEqual(self.nav.target.orbit_y, ORBIT_Y_MAX)

    def test_horizontal_spin_is_unbounded(self):
        for _ in range(100):
            self.nav.on_delta_move(-0.1, 0.0)
        self.assertGreater(self.nav.target.orbit_x, 2 * math.pi)


class TestZoom(unittest.TestCase):

    def setUp(self):
        self.nav = MemoryNavigator(10)

    def test_spread_zooms_out(self):
        self.nav.on_five_finger_zoom(0.6)
        self.assertAlmostEqual(self.nav.target.zoom, 8.6)

    def test_zoom_is_clamped(self):
        self.nav.on_five_finger_zoom(100.0)
        self.assertEqual(self.nav.target.zoom, ZOOM_MAX)
        self.nav.on_five_finger_zoom(-100.0)
        self.assertEqual(self.nav.target.zoom, ZOOM_MIN)

    def test_select_moves_closer_with_floor(self):
        self.nav.on_index_move(0.95, 0.5)
        self.nav.on_select()
        self.assertEqual(self.nav.target.zoom, 7.0)
        self.nav.on_five_finger_zoom(-2.5)
        self.nav.on_select()
        self.assertEqual(self.nav.target.zoom, 5.0)


class TestHighlight(unittest.TestCase):

    def setUp(self):
        self.nav = MemoryNavigator(10)

    def test_index_x_is_mirrored(self):
        self.nav.on_index_move(0.95, 0.5)
        self.assertEqual(self.nav.highlighted, 0)
        self.nav.on_index_move(0.05, 0.5)
        self.assertEqual(self.nav.highlighted, 9)
        self.nav.on_index_move(0.0, 0.5)
        self.assertEqual(self.nav.highlighted, 9)

    def test_scroll_maps_band_to_memories(self):
        self.nav.on_scroll_move(0.1)
        self.assertEqual(self.nav.highlighted, 0)
        self.nav.on_scroll_move(0.53)
        self.assertEqual(self.nav.highlighted, 5)
        self.nav.on_scroll_move(0.95)
        self.assertEqual(self.nav.highlighted, 9)

    def test_select_without_highlight_does_nothing(self):
        self.nav.on_select()
        self.assertIsNone(self.nav.selected)
        self.assertEqual(self.nav.target.zoom, 8.0)

    def test_no_memories(self):
        nav = MemoryNavigator(0)
        nav.on_index_move(0.5, 0.5)
        nav.on_scroll_move(0.5)
        nav.on_select()
        self.assertIsNone(nav.highlighted)
        self.assertIsNone(nav.selected)

    def test_shrinking_tree_clamps_highlight(self):
        self.nav.on_index_move(0.05, 0.5)
        self.nav.memory_count = 4
        self.assertEqual(self.nav.highlighted, 3)
        self.nav.memory_count = 0
        self.assertIsNone(self.nav.highlighted)

    def test_clear(self):
        self.nav.on_index_move(0.5, 0.5)
        self.nav.on_select()
        self.nav.clear()
        self.assertIsNone(self.nav.highlighted)
        self.assertIsNone(self.nav.selected)


class TestCameraRig(unittest.TestCase):

    def test_ease_moves_fraction_toward_target(self):
        nav = MemoryNavigator(3)
        nav.on_five_finger_zoom(2.0)
        nav.ease()
        self.assertAlmostEqual(nav.current.zoom, 8.0 + 2.0 * 0.15)

    def test_position_on_sphere(self):
        x, y, z = CameraPose(orbit_x=0.0, orbit_y=0.0, zoom=8.0).position()
        self.assertAlmostEqual(x, 0.0)
        self.assertAlmostEqual(y, 1.0)
        self.assertAlmostEqual(z, 8.0)


class TestWiring(unittest.TestCase):

    def test_driven_by_gesture_manager(self):
        nav = MemoryNavigator(10)
        manager = GestureManager(callbacks=nav.callbacks(), on_snapshot=nav.on_snapshot)

        manager.update(point(index=(0.42, 0.40)), 0.0)
        self.assertIsNotNone(nav.highlighted)

        for t in (10.0, 20.0, 30.0):
            manager.update(pinch(), t)
        manager.update(point(), 200.0)
        self.assertEqual(nav.selected, 5)

    def test_first_five_finger_frame_rotates_with_multiplier(self):
        nav = MemoryNavigator(10)
        seen = []
        on_delta = nav.on_delta_move

        def on_delta_move(dx, dy):
            seen.append(nav.rotation_multiplier)
            on_delta(dx, dy)

        callbacks = nav.callbacks()
        callbacks.on_delta_move = on_delta_move
        manager = GestureManager(callbacks=callbacks, on_snapshot=nav.on_snapshot)

        manager.update(open_palm(spread=0.30), 0.0)
        manager.update(open_palm(spread=0.32), 10.0)
        result = manager.update(open_palm(spread=0.36), 20.0)

        self.assertTrue(result.snapshot.is_five_finger_mode)
        self.assertEqual(seen, [1.0, 2.0])

    def test_five_finger_zoom_moves_camera(self):
        nav = MemoryNavigator(10)
        manager = GestureManager(callbacks=nav.callbacks(), on_snapshot=nav.on_snapshot)
        for t in (0.0, 10.0, 20.0):
            manager.update(open_palm(spread=0.30), t)
        manager.update(open_palm(spread=0.34), 30.0)
        self.assertAlmostEqual(nav.target.zoom, 8.6, places=5)


if __name__ == "__main__":
    unittest.main()
