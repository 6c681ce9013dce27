"""Identity resolution, provenance classification and scan result types."""
