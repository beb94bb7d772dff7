"""gildedrose — nightly inventory updates for the Gilded Rose shop."""

__version__ = "0.1.0"
