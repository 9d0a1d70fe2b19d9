"""Motor insurance rating engine — OD, TP, add-ons and GST for one tariff snapshot."""

__version__ = "1.0.0"
