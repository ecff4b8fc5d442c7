"""Leave-request helper: turns photographed duty rosters into a dated flight schedule."""
