"""
Entry point for the `fossilvc` command-line interface.

fossilvc drives a Fossil checkout through the fossil executable: file
state, history navigation, checkout info and the usual check-in,
update, tag and diff commands.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the fossilvc CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
