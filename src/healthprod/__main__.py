"""HealthProd entry point.

Usage:
    python -m healthprod [OPTIONS]

Options:
    --config PATH        Path to YAML config file
    --profile NAME       Profile name (dev, prod, test)
    --mock               Use mock components (no speech, AI or network)
    --demo               Start with sample activities
    --transcripts PATH   Read voice transcripts from a file ("-" for stdin,
                         which replaces the interactive shell)
    --listen             Start voice listening immediately
    --help               Show this help message
    --version            Show version
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from . import __version__
from .config.loader import load_config
from .config.profiles import detect_profile

if TYPE_CHECKING:
    from .app.application import HealthProdApp


def load_env() -> None:
    """Load .env from the project root, falling back to the working directory."""
    env_file = Path(__file__).parent.parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        load_dotenv()


def setup_logging(level: str) -> None:
    """Configure logging based on config."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def wait_for_transcripts(app: "HealthProdApp", poll_interval: float = 0.1) -> None:
    """Block until the voice listener has used up its transcript stream.

    Used instead of the interactive shell when transcripts come from stdin,
    since both would read the same stream.
    """
    logger = logging.getLogger("healthprod")
    if not app.listener.is_listening:
        logger.warning("Voice listener not running; no transcripts will be read")
        return
    while app.listener.is_listening and app.voice_input_available:
        time.sleep(poll_interval)
    logger.info("Transcript input finished")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="healthprod",
        description="HealthProd - AI life companion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m healthprod                     # Run with auto-detected profile
  python -m healthprod --profile prod      # Run with production profile
  python -m healthprod --mock --demo       # Offline demo with sample data
  python -m healthprod --transcripts -     # Voice transcripts from stdin, no shell

Environment:
  HEALTHPROD_PROFILE   Set profile (dev, prod, test)
  ANTHROPIC_API_KEY    API key for AI features
""",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML config file", metavar="PATH")
    parser.add_argument(
        "--profile", choices=["dev", "prod", "test"], help="Configuration profile to use"
    )
    parser.add_argument(
        "--version", action="version", version=f"HealthProd v{__version__}"
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Load config and exit (for testing)"
    )
    parser.add_argument(
        "--mock", action="store_true", help="Use mock components (for testing without hardware)"
    )
    parser.add_argument("--demo", action="store_true", help="Start with sample activities")
    parser.add_argument(
        "--transcripts",
        metavar="PATH",
        help="Read finalized voice transcripts line by line ('-' for stdin)",
    )
    parser.add_argument(
        "--listen", action="store_true", help="Start voice listening immediately"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for HealthProd.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    load_env()
    args = parse_args(argv)
    profile = args.profile or detect_profile().value

    try:
        if args.config:
            config = load_config(path=args.config)
        else:
            config = load_config(profile=profile)
    except FileNotFoundError as e:
        print(f"Error: Config file not found: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging.level)
    logger = logging.getLogger("healthprod")

    logger.info(f"HealthProd v{__version__}")
    logger.info(f"Profile: {profile}")
    logger.info(f"Log level: {config.logging.level}")

    if args.dry_run:
        logger.info("Dry run mode - exiting after config load")
        logger.info(f"Wake phrase: {config.voice.wake_phrase}")
        logger.info(f"AI model: {config.ai.model}")
        logger.info(f"Storage: {config.storage.path}")
        return 0

    from .app.application import HealthProdApp
    from .app.shell import HealthProdShell

    use_mocks = config.testing.use_mocks or args.mock
    try:
        app = HealthProdApp.from_config(
            config,
            use_mocks=use_mocks,
            transcript_path=args.transcripts,
            seed_demo=args.demo,
        )
    except Exception as e:
        logger.error(f"Failed to initialize components: {e}")
        print(f"\nError: Failed to initialize HealthProd: {e}")
        return 1

    print("\n" + "=" * 50)
    print("  HealthProd - AI Life Companion")
    print("=" * 50)
    print(f"  Version: {__version__}")
    print(f"  Profile: {profile}")
    print(f"  Capabilities: {app.capabilities.describe()}")
    print(f"  Wake phrase: '{config.voice.wake_phrase}'")
    print(f"  Personality: {app.personality.name}")
    if args.transcripts == "-":
        print("  Voice transcripts: stdin (interactive shell disabled)")
    print("=" * 50 + "\n")

    app.start(listen=args.listen or args.transcripts is not None)
    try:
        if args.transcripts == "-":
            wait_for_transcripts(app)
        else:
            HealthProdShell(app).cmdloop()
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
    finally:
        app.stop()
        logger.info("HealthProd shut down gracefully")

    return 0


if __name__ == "__main__":
    sys.exit(main())
