#!/usr/bin/env python3
"""Run a demo of Clock Face in headless mode."""

import asyncio
import logging
import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from clock_face.app import GameLoop
from clock_face.renderer import HeadlessRenderer
from clock_face.scenes import SceneLoader
from clock_face.types import HandKind


def print_state(state, renderer):
    """Print current frame state."""
    print("\n" + "=" * 41)
    print(f"Elapsed: {state.elapsed:.2f}s  Ticks: {state.tick_count}")
    for hand in HandKind:
        print(f"  {hand.value:>6}: {state.rotation(hand):8.3f} deg")
    print(renderer.get_screen_string())


async def run_demo(scene_name: str, seconds: int):
    """Run each clock for a few seconds, printing once per tick."""
    print(f"Clock Face Demo: {scene_name}")

    loader = SceneLoader()
    engine = loader.load(scene_name)
    renderer = HeadlessRenderer()
    loop = GameLoop(engine=engine, renderer=renderer, target_fps=10)

    last_tick = -1
    loop.start()
    while engine.elapsed < seconds:
        loop.process_frame()
        state = engine.get_state()
        if state.tick_count != last_tick:
            last_tick = state.tick_count
            print_state(state, renderer)
        await asyncio.sleep(loop.target_frame_time)

    engine.destroy()
    print("\n[Engine destroyed]")


def main():
    """Main entry point."""
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")
    scene_name = sys.argv[1] if len(sys.argv) > 1 else "incremental-clock"
    seconds = int(sys.argv[2]) if len(sys.argv) > 2 else 5
    asyncio.run(run_demo(scene_name, seconds))


if __name__ == "__main__":
    main()
