"""Click subcommands registered on the ``arithcode`` group."""
