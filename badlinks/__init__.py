"""badlinks - find broken local links in markdown documentation."""
