"""HTTP app serving the daily game data."""
