"""Entry point - launches the practice battle walkthrough.

Usage:
    python main.py          # Launch the client
    python main.py reset    # Forget that the tutorial was completed
"""

import sys
import asyncio
import pygame  # noqa: F401 (must be top-level so Pygbag pre-loads pygame-wasm)


async def main():
    args = sys.argv[1:]

    if not args or args[0] == "client":
        try:
            print("[main] creating App")
            from client.app import App
            app = App()
            print("[main] starting run loop")
            await app.run()
            print("[main] run loop ended")
        except Exception:
            import traceback
            print(traceback.format_exc())
            raise
    elif args[0] == "reset":
        from client.tutorial_persistence import reset_tutorial
        reset_tutorial()
        print("[main] Tutorial progress reset")
    else:
        print(__doc__)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
