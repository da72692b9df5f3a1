"""Result helpers shared by the CLI."""
