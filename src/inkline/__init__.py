"""Inkline: free-hand number line sketching."""
