"""Application layer: operator catalog and host type binding."""
