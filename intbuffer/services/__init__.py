"""Services Layer — imperative shell applying Settings to the pure core."""
