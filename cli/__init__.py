"""bbe subcommands."""
