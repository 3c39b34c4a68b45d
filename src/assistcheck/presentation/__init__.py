"""assistcheck presentation layer: command line interface."""
