"""Feature packages: player facade and artwork cache."""
