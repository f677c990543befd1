# =========================
# LANDMARK INDICES (MediaPipe Hands)
# =========================
WRIST = 0

THUMB_TIP = 4
INDEX_TIP = 8
MIDDLE_TIP = 12
RING_TIP = 16
PINKY_TIP = 20

THUMB_MCP = 2
INDEX_MCP = 5
MIDDLE_MCP = 9
RING_MCP = 13
PINKY_MCP = 17

NUM_LANDMARKS = 21

FINGERTIP_INDICES = (THUMB_TIP, INDEX_TIP, MIDDLE_TIP, RING_TIP, PINKY_TIP)

# (tip, base knuckle) per finger, thumb first
FINGERS = {
    "THUMB":  (THUMB_TIP, THUMB_MCP),
    "INDEX":  (INDEX_TIP, INDEX_MCP),
    "MIDDLE": (MIDDLE_TIP, MIDDLE_MCP),
    "RING":   (RING_TIP, RING_MCP),
    "PINKY":  (PINKY_TIP, PINKY_MCP),
}

HAND_CONNECTIONS = (
    (0, 1, 2, 3, 4),
    (0, 5, 6, 7, 8),
    (0, 9, 10, 11, 12),
    (0, 13, 14, 15, 16),
    (0, 17, 18, 19, 20),
)

# =========================
# PINCH / TAP
# =========================
PINCH_THRESHOLD = 0.06
PINCH_EXCLUSION_THRESHOLD = 0.10
PINCH_STABILITY_FRAMES = 3
PINCH_MIN_HOLD_MS = 150.0
PINCH_MAX_HOLD_MS = 600.0
SELECT_COOLDOWN_MS = 500.0

# =========================
# FIVE-FINGER (rotate / zoom)
# =========================
FIVE_FINGER_STABILITY_FRAMES = 3
SPREAD_ZOOM_SENSITIVITY = 15.0
FIVE_FINGER_ROTATION_MULT = 2.0
ZOOM_DELTA_THRESHOLD = 0.01
FINGER_EXTENSION_MARGIN = 1.05

# =========================
# ONE-FINGER SCROLL
# =========================
CLUMP_THRESHOLD = 0.12
INDEX_EXTENSION_THRESHOLD = 0.15

# =========================
# POINTER / DELTA
# =========================
SMOOTHING_FACTOR = 0.3
DELTA_DEADZONE = 0.002

# =========================
# SNAPSHOT PUBLISHING
# =========================
PUBLISH_INTERVAL_MS = 100.0
POSITION_TOLERANCE = 0.01
SCROLL_TOLERANCE = 0.02
