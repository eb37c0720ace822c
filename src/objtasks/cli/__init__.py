"""objtasks command line interface."""
