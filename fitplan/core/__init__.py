"""Records, formulas, catalog, configuration and storage for fitplan."""
