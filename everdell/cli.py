"""
Everdell CLI - Command-line interface for the engine.

Usage:
    everdell demo [--ticks N]          Run a scripted hover/press session
    everdell serve [--host H --port P] Serve the REST API
"""

import argparse
import sys

from .config import Settings, configure_logging


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Everdell - Prototype card game engine",
        prog="everdell",
    )
    parser.add_argument("--log-level", help="Override EVERDELL_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    demo_parser = subparsers.add_parser("demo", help="Run a scripted session")
    demo_parser.add_argument("--ticks", type=int, default=6, help="Number of ticks to run")

    serve_parser = subparsers.add_parser("serve", help="Serve the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    settings = Settings.from_env()
    configure_logging(args.log_level or settings.log_level)

    if args.command == "demo":
        cmd_demo(args, settings)
    elif args.command == "serve":
        cmd_serve(args, settings)
    else:
        parser.print_help()
        sys.exit(1)


def demo_script(first_visual: str) -> list[dict[str, str]]:
    """Hover a card, press it, keep pressing, then let go."""
    return [
        {},
        {first_visual: "hovered"},
        {first_visual: "pressed"},
        {first_visual: "pressed"},
        {first_visual: "none"},
    ]


def cmd_demo(args, settings: Settings):
    """Run a scripted session and print each frame."""
    from .session import GameLoop, World

    loop = GameLoop(World.with_capacity(settings.event_capacity))
    world = loop.initialize()
    first_visual = world.hand_view.order[0]
    script = demo_script(first_visual)

    for i in range(args.ticks):
        signals = script[i] if i < len(script) else {}
        result = loop.tick(signals)

        print(f"--- tick {result.tick} {signals or ''}")
        print(result.stash_text)
        print("Hand: " + ", ".join(
            f"{v.label} [{v.interaction.value}]" for v in result.hand
        ))
        for event in result.events:
            print(f"Played {event.card_instance_id} ({event.visual_id})")

    print(f"\nDraw pile: {world.game.draw_pile.count}  Discard pile: {world.game.discard_pile.count}")


def cmd_serve(args, settings: Settings):
    """Serve the REST API with uvicorn."""
    import uvicorn

    from .api import create_app

    uvicorn.run(create_app(settings=settings), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
