"""Main CLI entry point with command routing."""

import sys


def main() -> None:
    """Main CLI entry point."""
    # Check for CLI dependencies
    try:
        from ansi_escapes.cli.app import create_app
        app = create_app()
    except ImportError:
        # Minimal fallback without typer
        _fallback_main()
        return
    app()


def _fallback_main() -> None:
    """Minimal CLI when typer is not installed."""
    args = sys.argv[1:]

    if not args or args[0] in ("-h", "--help"):
        print("ansi-escapes - ANSI escape sequence inspector")
        print()
        print("Install CLI extras for full functionality:")
        print("  uv pip install ansi-escapes[cli]")
        print()
        print("Basic usage (library mode):")
        print("  python -c \"import ansi_escapes as ansi; print(repr(ansi.erase_lines(2)))\"")
        return

    if args[0] == "list":
        from ansi_escapes.catalog import SEQUENCES
        width = max(len(name) for name in SEQUENCES)
        for name, sequence in SEQUENCES.items():
            print(f"{name:<{width}}  {sequence!r}")
        return

    print(f"Unknown command: {args[0]}")
    print("Install CLI extras: uv pip install ansi-escapes[cli]")
    sys.exit(1)


if __name__ == "__main__":
    main()
