#!/usr/bin/env python3
"""Save a single rendered frame to view."""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from clock_face.renderer import ImageRenderer
from clock_face.scenes import SceneLoader


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    # Absolute clock shows the current time on its first tick
    engine = SceneLoader().load("absolute-clock")
    renderer = ImageRenderer(size=400)

    renderer.render_frame(engine.get_state())

    output = Path(__file__).parent.parent / "frame.png"
    renderer.save(output)
    engine.destroy()
    print(f"Saved frame to {output}")
    print(f"Render time: {renderer.last_render_time*1000:.1f}ms")


if __name__ == "__main__":
    main()
