import argparse

tree_parser = argparse.ArgumentParser(
    prog="treegestures",
    description="Navigate the memory tree with hand gestures.",
)

tree_parser.add_argument("--config", help="Path to YAML config file.", default=None)
tree_parser.add_argument(
    "--replay",
    help="Replay a recorded landmark JSON file instead of using the camera.",
    default=None,
)
tree_parser.add_argument(
    "--record",
    help="Save the processed landmark stream to this JSON file.",
    default=None,
)
tree_parser.add_argument(
    "--memories",
    help="Number of memories on the tree.",
    type=int,
    default=None,
)
tree_parser.add_argument(
    "--max-frames",
    help="Stop after this many frames.",
    type=int,
    default=None,
)
tree_parser.add_argument(
    "--no-ui",
    help="Run headless, without the preview window.",
    action="store_true",
    default=False,
)
tree_parser.add_argument(
    "--debug",
    help="Enable debug logging.",
    action="store_true",
    default=False,
)

get_args = tree_parser.parse_args
