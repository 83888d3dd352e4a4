"""Command-line host for the dust simulator."""
