"""splice command line interface."""
