"""Click subcommands for ghcpick."""
