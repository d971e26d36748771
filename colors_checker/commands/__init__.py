"""colors-tool subcommands, one module each. See colors_checker.registry."""
