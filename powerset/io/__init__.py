"""Command line front end and run-file loading."""
