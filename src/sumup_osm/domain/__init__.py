"""Domain layer for sumup_osm.

Services are imported from their own modules; this package stays free of
imports so that ``sumup_osm.utils`` can depend on ``domain.errors``.
"""
