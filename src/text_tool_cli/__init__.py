"""Command-line front end for the editor tool."""
