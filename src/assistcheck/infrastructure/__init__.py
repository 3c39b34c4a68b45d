"""assistcheck infrastructure: AST symbol source, sinks, writers."""
