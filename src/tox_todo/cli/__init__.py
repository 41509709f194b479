"""Command-line front end: argument parsing, rendering and process wiring."""
