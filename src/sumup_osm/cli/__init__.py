"""Command-line interface for sumup_osm."""
