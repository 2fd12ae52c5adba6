"""SitConnect - matching pet and house sitting requesters with sitters."""

__version__ = "0.1.0"
