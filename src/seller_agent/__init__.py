"""Seller-side negotiation engine for items whose asking price decays toward a floor."""
